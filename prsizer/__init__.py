import logging
import os

try:
    from . import _version

    __version__ = _version.__version__
except ImportError:
    __version__ = "0.0.0-dev"

from .services.outputs import WorkflowCommandFormatter

# Configure logging on package import
log_level = os.environ.get("APP_LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO")).upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(levelname)s:%(name)s:%(message)s",
    force=True,
)

# Inside a workflow run, warnings and errors become job annotations
if os.environ.get("GITHUB_ACTIONS") == "true":
    for handler in logging.getLogger().handlers:
        handler.setFormatter(WorkflowCommandFormatter())
