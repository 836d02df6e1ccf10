"""Rendition resolution."""

from .candidates import CandidateCache, build_candidates
from .engine import RenditionHandler

__all__ = ["CandidateCache", "RenditionHandler", "build_candidates"]
