import logging
import os
import pathlib
from argparse import ArgumentParser

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_parser():
    parser = ArgumentParser(prog="objviewer")
    parser.add_argument(
        "--git-dir",
        type=pathlib.Path,
        default=pathlib.Path(os.environ.get("GIT_DIR", ".git")),
        help="path to the git directory (default: $GIT_DIR or .git)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command")

    # cat-file
    cat_file_parser = subparsers.add_parser("cat-file")
    cat_file_parser.add_argument(
        "--strict", action="store_true", help="fail on truncated tree entries"
    )
    cat_file_parser.add_argument("hash")

    # ls-tree
    ls_tree_parser = subparsers.add_parser("ls-tree")
    ls_tree_parser.add_argument("--name-only", action="store_true")
    ls_tree_parser.add_argument("--strict", action="store_true")
    ls_tree_parser.add_argument("hash_value")

    # show
    show_parser = subparsers.add_parser("show")
    show_parser.add_argument("--strict", action="store_true")
    show_parser.add_argument("path", type=pathlib.Path)

    # ls
    ls_parser = subparsers.add_parser("ls")
    ls_parser.add_argument("prefix", nargs="?", default=None)

    return parser


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
