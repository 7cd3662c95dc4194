"""
Lightweight API-only testing configuration
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_BASE_URL = "https://fakerestapi.azurewebsites.net/api/v1"
REPORTERS = ("html", "json", "junit", "list", "line")


def _default_workers() -> str:
    # CI machines get a single worker unless told otherwise
    return os.getenv("WORKERS") or ("1" if os.getenv("CI") else "auto")


@dataclass
class SuiteConfig:
    """Black-box bookstore API testing configuration"""

    # Target API
    api_base_url: str = field(default_factory=lambda: os.getenv("BASE_URL", DEFAULT_BASE_URL))

    # Test runner
    workers: str = field(default_factory=_default_workers)
    reporter: str = field(default_factory=lambda: os.getenv("REPORTER", "html"))
    test_dir: str = field(default_factory=lambda: os.getenv("TEST_DIR", "api_tests"))
    report_dir: str = field(default_factory=lambda: os.getenv("REPORT_DIR", "reports"))

    def __post_init__(self):
        self.api_base_url = self.api_base_url.rstrip("/")

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append(f"BASE_URL must be an http(s) URL, got '{self.api_base_url}'")

        if self.workers != "auto" and not (self.workers.isdigit() and int(self.workers) > 0):
            errors.append(f"WORKERS must be a positive integer or 'auto', got '{self.workers}'")

        if self.reporter not in REPORTERS:
            errors.append(f"REPORTER must be one of {', '.join(REPORTERS)}, got '{self.reporter}'")

        if not self.test_dir:
            errors.append("TEST_DIR must not be empty")

        return errors


def get_config(**overrides) -> SuiteConfig:
    """Get validated test configuration"""
    config = SuiteConfig(**{key: value for key, value in overrides.items() if value is not None})
    errors = config.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
