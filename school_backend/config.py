"""
Configuration management for the school backend.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name, default):
    """Read a true/false environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Authentication
JWT_SECRET = os.getenv("JWT_SECRET", "e2e-secret")
JWT_ALGORITHM = "HS256"
JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "2"))

# CSRF header check (placeholder, presence only)
ENABLE_CSRF = _env_flag("ENABLE_CSRF", False)
CSRF_HEADER_NAME = os.getenv("CSRF_HEADER_NAME", "X-CSRF-Token")

# Grade store
SEED_DEMO_DATA = _env_flag("SEED_DEMO_DATA", True)
ENFORCE_STUDENT_BINDING = _env_flag("ENFORCE_STUDENT_BINDING", False)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
AUDIT_LOG_FILE = os.getenv("AUDIT_LOG_FILE", "")

# Server configuration
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
DEBUG = _env_flag("DEBUG", False)


class Config:
    """Application configuration class."""

    def __init__(self):
        self.jwt_secret = JWT_SECRET
        self.jwt_algorithm = JWT_ALGORITHM
        self.jwt_expires_hours = JWT_EXPIRES_HOURS
        self.enable_csrf = ENABLE_CSRF
        self.csrf_header_name = CSRF_HEADER_NAME
        self.seed_demo_data = SEED_DEMO_DATA
        self.enforce_student_binding = ENFORCE_STUDENT_BINDING
        self.log_level = LOG_LEVEL
        self.audit_log_file = AUDIT_LOG_FILE
        self.cors_origins = CORS_ORIGINS
        self.host = HOST
        self.port = PORT
        self.debug = DEBUG

    def to_dict(self):
        return {
            "jwt_algorithm": self.jwt_algorithm,
            "jwt_expires_hours": self.jwt_expires_hours,
            "enable_csrf": self.enable_csrf,
            "csrf_header_name": self.csrf_header_name,
            "seed_demo_data": self.seed_demo_data,
            "enforce_student_binding": self.enforce_student_binding,
            "log_level": self.log_level,
            "audit_log_file": self.audit_log_file,
            "cors_origins": self.cors_origins,
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
        }

    def update(self, data: dict):
        for key, value in data.items():
            if hasattr(self, key):
                setattr(self, key, value)


# Global config instance
config = Config()
