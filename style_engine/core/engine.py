"""
Core style engine implementation.
This module ties the HTML parser, CSS parser and style resolver together
behind a configured, logged entry point.
"""

import logging
from typing import Optional

from style_engine.css import Stylesheet
from style_engine.dom import Node
from style_engine.parser import ParseError, parse_css, parse_html
from style_engine.style import StyledNode, style_tree
from style_engine.utils.config import Config
from style_engine.utils.logging import PerformanceLogger, get_default_log_file, log_exception, setup_logging

logger = logging.getLogger(__name__)


class StyleEngine:
    """
    Main style engine that coordinates parsing and style resolution.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the style engine.

        Args:
            config: Configuration to use; defaults are used when None
        """
        self.config = config or Config()

        log_file = self.config.get('logging.log_file')
        if not log_file and self.config.get('logging.file_enabled', False):
            log_file = get_default_log_file()

        setup_logging(
            log_file=log_file,
            console_level=self.config.get('logging.console_level', 'WARNING'),
            file_level=self.config.get('logging.file_level', 'DEBUG'))

        self.performance_enabled = bool(self.config.get('performance.enabled', True))
        self.perf = PerformanceLogger(logger, "StyleEngine")

        logger.debug("Style engine initialized")

    def parse_html(self, source: str) -> Node:
        """
        Parse an HTML document.

        Args:
            source: HTML text

        Returns:
            The document root

        Raises:
            ParseError: If the markup is malformed
        """
        self._start("parse_html")
        try:
            root = parse_html(source)
        except ParseError as e:
            log_exception(logger, e, "Error parsing HTML")
            raise
        self._end("parse_html")
        return root

    def parse_css(self, source: str) -> Stylesheet:
        """
        Parse a CSS stylesheet.

        Args:
            source: CSS text

        Returns:
            The parsed stylesheet

        Raises:
            ParseError: If the stylesheet is malformed
        """
        self._start("parse_css")
        try:
            stylesheet = parse_css(source)
        except ParseError as e:
            log_exception(logger, e, "Error parsing CSS")
            raise
        self._end("parse_css")
        return stylesheet

    def style_tree(self, root: Node, stylesheet: Stylesheet) -> StyledNode:
        """Apply `stylesheet` to the DOM rooted at `root`."""
        self._start("style_tree")
        styled = style_tree(root, stylesheet)
        self._end("style_tree")
        return styled

    def style(self, html_source: str, css_source: str) -> StyledNode:
        """
        Parse a document and a stylesheet and style the document.

        Args:
            html_source: HTML text
            css_source: CSS text

        Returns:
            The styled tree

        Raises:
            ParseError: If either input is malformed
        """
        root = self.parse_html(html_source)
        stylesheet = self.parse_css(css_source)
        return self.style_tree(root, stylesheet)

    def _start(self, name: str) -> None:
        if self.performance_enabled:
            self.perf.start(name)

    def _end(self, name: str) -> None:
        if self.performance_enabled:
            self.perf.end(name)
