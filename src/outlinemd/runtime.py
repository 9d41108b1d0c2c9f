"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.markdown_formatter import MarkdownFormatter
from .adapters.markdown_parser import MarkdownParser
from .adapters.outline_api import OutlineClient
from .config import AppConfig, load_config, resolve_token
from .core.ports import DocumentApi, FormatterStrategy, ParserStrategy


@dataclass
class Runtime:
    """Container for all wired components."""
    parser: ParserStrategy
    formatter: FormatterStrategy
    config: AppConfig
    api: DocumentApi | None = None

    def client(self) -> DocumentApi:
        """Return the API client, creating it on first use."""
        if self.api is None:
            token = resolve_token(self.config)
            self.api = OutlineClient(
                token,
                base_url=self.config.api.base_url,
                timeout=self.config.api.timeout,
            )
        return self.api

    def close(self) -> None:
        """Release the API client, if one was created."""
        if self.api is not None:
            self.api.close()
            self.api = None


def build_runtime(config_path: Path | None = None) -> Runtime:
    """Build and wire all components.

    The API client is created lazily so that offline commands work
    without a token.
    """
    config = load_config(config_path=config_path)
    return Runtime(
        parser=MarkdownParser(),
        formatter=MarkdownFormatter(),
        config=config,
    )
