"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Iterable, Mapping

import click

from DynamicPageList.cli.factories import create_directive_parser, create_wiki_context
from DynamicPageList.config import AppConfig
from DynamicPageList.core.errors import DirectiveError, StructuralError
from DynamicPageList.renderers import dumps
from DynamicPageList.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_parse(
        self,
        action: str,
        text: str,
        *,
        request: Mapping[str, str] | None = None,
        granted: Iterable[str] = (),
    ) -> str:
        """Parse one directive and return its JSON rendering.

        Args:
            action: The CLI command name (e.g., 'parse').
            text: Directive body.
            request: Request arguments for ``scroll``.
            granted: Rights held by the caller.

        Returns:
            The rendered query specification.

        Raises:
            click.Abort: When the directive is aborted.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        wiki = create_wiki_context(self.config, request=request, granted=granted)
        parser = create_directive_parser(self.config, wiki)
        try:
            result = parser.parse(text)
        except (DirectiveError, StructuralError) as e:
            log.error("Directive aborted: %s", e)
            raise click.Abort from e

        for issue in result.issues:
            log.warning("%s: %s", issue.kind, issue.message)
        log.info("Processed %d parameters", len(result.spec.processed_parameters))
        return dumps(result)
