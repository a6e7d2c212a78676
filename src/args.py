"""Argument parsing for the setup-python helper CLI."""

import argparse


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="setup-python-utils",
        description=(
            "Resolve python versions to install and check cache availability"
        ),
        add_help=True,
    )

    parser.add_argument("-v", "--python-version",
                        dest="PYTHON_VERSIONS",
                        help="Version to install (repeatable); wins over --python-version-file",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-f", "--python-version-file",
                        dest="PYTHON_VERSION_FILE",
                        help="File to read versions from (.python-version, pyproject.toml, "
                             ".tool-versions, Pipfile)",
                        action="store",
                        type=str)
    parser.add_argument("--validate",
                        dest="VALIDATE",
                        help="Reject resolved versions that are not valid for this runtime family",
                        action="store",
                        type=str.lower,
                        choices=["pypy", "semver"])
    parser.add_argument("--check-cache",
                        dest="CHECK_CACHE",
                        help="Report whether the Actions cache service can be used.",
                        action="store_true")
    parser.add_argument("--releases",
                        dest="RELEASES",
                        help="List release tags of a GitHub repository (OWNER/REPO)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')

    return parser.parse_args(argv)
