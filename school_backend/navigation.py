"""
Navigation helpers for the single-page frontend.

Breadcrumb trails and per-section link sets are derived from the URL path
alone. The lookup tables are plain data so they can be tested and swapped
independently of the functions that read them.
"""
import re

# URL segment -> breadcrumb label
ROUTE_LABELS = {
    '': 'Home',
    'home': 'Home',
    'about': 'About Us',
    'academic': 'Academic',
    'updates': 'Academy Updates',
    'admissions': 'Admissions',
    'gallery': 'Gallery',
    'fee-payment': 'Fee Payment',
    'contact': 'Contact',
    'admin': 'Admin',
    'dashboard': 'Dashboard',
    'manage-students': 'Manage Students',
    'manage-faculty': 'Manage Faculty',
    'schedule-manager': 'Schedule Manager',
    'faculty-assignment': 'Faculty Assignment',
    'student-enrollment': 'Student Enrollment',
    'settings': 'Settings',
    'admissions-management': 'Admissions Management',
    'fee-management': 'Fee Management',
    'reports': 'Reports',
    'academic-calendar': 'Academic Calendar',
    'transport-management': 'Transport Management',
    'grades': 'Grades',
    'faculty': 'Faculty',
    'attendance': 'Attendance',
    'courses': 'Courses',
    'subjects': 'Subjects',
    'online-classes': 'Online Classes',
    'profile': 'Profile',
    'student': 'Student',
    'assignments': 'Assignments',
}

_WORD_START = re.compile(r'\b\w')

SECTION_NONE = 'none'

# Section -> path prefix that selects it
SECTION_PREFIXES = {
    'admin': '/admin',
    'faculty': '/faculty',
    'student': '/student',
}

# Section -> ordered (target, label) links
LINK_SETS = {
    'admin': [
        ('/admin/dashboard', 'Dashboard'),
        ('/admin/manage-students', 'Students'),
        ('/admin/manage-faculty', 'Faculty'),
        ('/admin/grades', 'Grades'),
        ('/admin/reports', 'Reports'),
    ],
    'faculty': [
        ('/faculty/dashboard', 'Dashboard'),
        ('/faculty/attendance', 'Attendance'),
        ('/faculty/courses', 'Courses'),
        ('/faculty/online-classes', 'Online Classes'),
        ('/faculty/profile', 'Profile'),
    ],
    'student': [
        ('/student/dashboard', 'Dashboard'),
        ('/student/courses', 'Courses'),
        ('/student/grades', 'Grades'),
        ('/student/assignments', 'Assignments'),
        ('/student/attendance', 'Attendance'),
        ('/student/fee-payment', 'Fee Payment'),
        ('/student/profile', 'Profile'),
    ],
}


def humanize_segment(segment):
    """'fee-payment' -> 'Fee Payment'."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), segment.replace('-', ' '))


def build_crumbs(path, labels=None):
    """
    Turn a URL path into breadcrumb entries.

    Each entry is {"path": accumulated prefix, "label": display label,
    "current": True only for the last entry}. The root path gives [].
    """
    if labels is None:
        labels = ROUTE_LABELS

    crumbs = []
    accumulated = ''
    for segment in (path or '').split('/'):
        if not segment:
            continue
        accumulated += '/' + segment
        label = labels.get(segment) or humanize_segment(segment)
        crumbs.append({"path": accumulated, "label": label, "current": False})

    if crumbs:
        crumbs[-1]["current"] = True
    return crumbs


def select_section(path, prefixes=None):
    """Return the section whose prefix the path starts with (longest wins), or 'none'."""
    if prefixes is None:
        prefixes = SECTION_PREFIXES

    path = path or ''
    matches = [
        (len(prefix), section) for section, prefix in prefixes.items()
        if path.startswith(prefix)
    ]
    if not matches:
        return SECTION_NONE
    return max(matches)[1]


def links_for_section(section, link_sets=None):
    """Ordered {"to", "label"} links for a section; [] for 'none'."""
    if link_sets is None:
        link_sets = LINK_SETS
    return [{"to": to, "label": label} for to, label in link_sets.get(section, [])]
