"""
Configuration constants for the Post Board client.

This module centralizes all configurable parameters so the remote
resource, validation limits and presentation strings can be tuned
in one place.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class APIConfig:
    """Remote posts resource settings."""
    base_url: str = "https://jsonplaceholder.typicode.com"
    posts_endpoint: str = "/posts"
    max_posts: int = 2  # Only the first entries of the listing are kept
    user_id: int = 1
    content_type: str = "application/json; charset=UTF-8"
    # None leaves the transport default in place
    timeout_seconds: Optional[float] = None


@dataclass
class FormConfig:
    """Client-side validation rules for post drafts."""
    title_max_length: int = 100
    body_max_length: int = 500

    title_required_message: str = "Title is required"
    body_required_message: str = "Content is required"
    title_length_message: str = "Title must be less than 100 characters"
    body_length_message: str = "Content must be less than 500 characters"


@dataclass
class ViewConfig:
    """Text rendering configuration."""
    heading: str = "Posts"
    loading_text: str = "Loading..."
    submit_label: str = "Add Post"
    submitting_label: str = "Adding Post"
    confirm_prompt: str = "Are you sure ?"

    post_template: str = "#{id} {title}\n    {body}"
    error_template: str = "  ! {message}"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "post_board.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    form: FormConfig = field(default_factory=FormConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
