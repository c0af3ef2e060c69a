"""Flatten a repository into one browsable HTML page plus a CXML dump for LLMs."""

__version__ = "2.0.0"

from .classifier import MAX_DEFAULT_BYTES, FileInfo, RenderDecision, Summary, collect_files, decide_file, looks_binary
from .content import SyntaxAssets
from .document import Artifacts, build_html, generate_cxml_text, load_documents, render_repository
from .errors import AcquisitionError, EasycopyError, InvalidThresholdError, RootUnreadableError
from .tree import generate_tree
from .utils import bytes_human, slugify

__all__ = [
    "MAX_DEFAULT_BYTES",
    "AcquisitionError",
    "Artifacts",
    "EasycopyError",
    "FileInfo",
    "InvalidThresholdError",
    "RenderDecision",
    "RootUnreadableError",
    "Summary",
    "SyntaxAssets",
    "build_html",
    "bytes_human",
    "collect_files",
    "decide_file",
    "generate_cxml_text",
    "generate_tree",
    "load_documents",
    "looks_binary",
    "render_repository",
    "slugify",
]
