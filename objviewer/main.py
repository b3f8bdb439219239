import sys
from operator import attrgetter

from objviewer.models import DecodeError, ObjectKind, ObjectNotFound, ObjectStore
from objviewer.render import (
    browse,
    describe,
    describe_file,
    render_error,
    render_not_found,
    render_tree,
)
from objviewer.utils import configure_logging, get_parser


def ls_tree(
    store: ObjectStore,
    hash_value: str,
    *,
    name_only: bool = False,
    strict: bool = False,
):
    try:
        obj = store.load(hash_value)
        if obj.kind is not ObjectKind.TREE:
            raise DecodeError(f"Not a tree object: {obj.kind}")
        entries = list(obj.entries(strict=strict))
    except ObjectNotFound as exc:
        sys.stderr.write(render_not_found(hash_value, exc.path) + "\n")
        return 1
    except (OSError, ValueError) as exc:
        sys.stderr.write(render_error(exc) + "\n")
        return 1

    if name_only:
        entries.sort(key=attrgetter("raw_name"))
        for entry in entries:
            sys.stdout.write(entry.name + "\n")
    elif entries:
        sys.stdout.write(render_tree(entries) + "\n")
    return 0


def ls(store: ObjectStore, prefix: str | None = None):
    if prefix is None:
        for name in store.fanout_dirs():
            sys.stdout.write(name + "\n")
        return 0
    try:
        for label, hash_ in browse(store, prefix):
            sys.stdout.write(f"{label}  {hash_}\n")
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


def _write_description(ok: bool, text: str):
    sys.stdout.write(text + "\n")
    return 0 if ok else 1


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    store = ObjectStore(args.git_dir)
    match args.command:
        case "cat-file":
            return _write_description(*describe(store, args.hash, strict=args.strict))
        case "ls-tree":
            return ls_tree(
                store, args.hash_value, name_only=args.name_only, strict=args.strict
            )
        case "show":
            return _write_description(*describe_file(args.path, strict=args.strict))
        case "ls":
            return ls(store, args.prefix)
        case _:
            parser.print_usage(sys.stderr)
            return 2


if __name__ == "__main__":
    sys.exit(main())
