from __future__ import annotations

import argparse
import json
import logging
import sys

from contracts.errors import ConfigurationError, MissingFileError
from orchestrator import WrapperExecutor


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - [%(levelname)s] - %(name)s - %(message)s",
        stream=sys.stderr,
    )


def _build_executor(args: argparse.Namespace) -> WrapperExecutor:
    if args.properties_file is not None:
        return WrapperExecutor.for_wrapper_properties_file(args.properties_file)
    return WrapperExecutor.for_project_directory(args.project_dir)


def _error_output(exc: Exception) -> dict:
    cause = exc.__cause__
    return {
        "error": str(exc),
        "cause": str(cause) if cause is not None else None,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the resolved wrapper configuration.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--project-dir")
    source.add_argument("--properties-file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        executor = _build_executor(args)
    except (ConfigurationError, MissingFileError) as exc:
        print(json.dumps(_error_output(exc), sort_keys=True))
        return 3

    output = {
        "properties_file": str(executor.properties_file),
        "configuration": executor.configuration.to_dict(),
    }
    print(json.dumps(output, sort_keys=True))

    if executor.distribution is None:
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
