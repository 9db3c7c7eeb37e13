from __future__ import annotations

"""CLI helper to produce a three-sentence summary of pasted text or a file."""

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from dotenv import load_dotenv

from summarize.inputs import InputError, ReadLine, collect_text
from summarize.services import OpenAIConfig, SummarizationClient, SummarizationError, SummaryResult

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing from the environment."""


class UsageError(RuntimeError):
    """Raised when the command line cannot be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.format_usage()}{self.prog}: error: {message}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        description="Summarise pasted text or a text file into three sentences via the OpenAI chat API."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request details to stderr")
    return parser.parse_args(argv)


def load_config() -> OpenAIConfig:
    load_dotenv()
    config = OpenAIConfig.from_env()
    if config is None:
        raise ConfigurationError("Missing OPENAI_API_KEY in environment. See .env")
    return config


def print_report(text: str, result: SummaryResult) -> None:
    print("\nOriginal length (characters):", len(text))
    print("Summary length (characters):", len(result.summary))
    print("\nSummary:\n")
    print(result.summary)

    if result.usage is not None:
        print("\nToken usage:")
        print("  prompt_tokens:", result.usage.prompt_tokens)
        print("  completion_tokens:", result.usage.completion_tokens)
        print("  total_tokens:", result.usage.total_tokens)
    else:
        print("\nToken usage not returned by API.")


def main(
    argv: Optional[Sequence[str]] = None,
    read_line: ReadLine = input,
    client: Optional[SummarizationClient] = None,
) -> int:
    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = load_config()
        text = collect_text(read_line)
    except (ConfigurationError, InputError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print("\nGenerating 3-sentence summary...")
    client = client or SummarizationClient(config)
    try:
        result = client.summarize(text)
    except SummarizationError as exc:
        print("OpenAI request failed:", exc, file=sys.stderr)
        return 1

    print_report(text, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
