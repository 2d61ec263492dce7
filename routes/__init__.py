"""Application route package."""
from flask import Blueprint

collect_bp = Blueprint('collect', __name__)

# pylint: disable=wrong-import-position
# Rationale: Blueprint must be created before importing route modules that register with it
from . import collect  # noqa: F401,E402

__all__ = ["collect_bp"]
