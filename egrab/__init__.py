"""Capture the markup, styles and script context behind a single page element."""

from egrab.capture import extract_all, run_action
from egrab.dom import (
    Declaration,
    ElementNode,
    PageDocument,
    ScriptBlock,
    StyleRule,
    StyleSheet,
    is_engine_element,
)
from egrab.javascript import extract_script_context, find_script_references
from egrab.markup import extract_markup, format_html
from egrab.report import CaptureReport, EgrabError, ErrorKind, SnapshotError
from egrab.selector import selector_for
from egrab.styles import extract_styles

__all__ = [
    "CaptureReport",
    "Declaration",
    "EgrabError",
    "ElementNode",
    "ErrorKind",
    "PageDocument",
    "ScriptBlock",
    "SnapshotError",
    "StyleRule",
    "StyleSheet",
    "extract_all",
    "extract_markup",
    "extract_script_context",
    "extract_styles",
    "find_script_references",
    "format_html",
    "is_engine_element",
    "run_action",
    "selector_for",
]
