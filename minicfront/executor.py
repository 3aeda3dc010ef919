"""Front-end driver: reads a source file and builds its syntax tree."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .ast_nodes import ASTNode
from .flex_lexer import scan
from .parser import ParseError, parse


class RecursiveDescentExecutor:
    """Runs the recursive-descent front end on one source file."""

    def __init__(self, filename: Union[str, Path]) -> None:
        self.filename = Path(filename)
        self.ast_root: Optional[ASTNode] = None

    def run(self) -> ASTNode:
        """Parse the file and return the root of its syntax tree.

        Raises OSError if the file cannot be read and ParseError if the
        text has syntax errors.
        """
        # newline="" keeps \r so the lexer can count every line ending style.
        with self.filename.open("r", encoding="utf-8", newline="") as source:
            text = source.read()
        self.ast_root = parse(text)
        return self.ast_root


def _describe(node: ASTNode) -> str:
    parts = [node.kind.name]
    if node.type_name is not None:
        parts.append(node.type_name)
    if node.name is not None:
        parts.append(node.name)
    if node.value is not None:
        parts.append(str(node.value))
    if node.line >= 0:
        parts.append(f"(line {node.line})")
    return " ".join(parts)


def _tree_lines(node: ASTNode, depth: int = 0) -> Iterator[str]:
    yield "  " * depth + _describe(node)
    for son in node.sons:
        yield from _tree_lines(son, depth + 1)


def _build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="minicfront",
        description="Parse a MiniC source file and print its syntax tree.",
    )
    arg_parser.add_argument("file", help="source file to read")
    arg_parser.add_argument(
        "-t",
        "--tokens",
        action="store_true",
        help="print the tokens of the table-driven scanner instead of the tree",
    )
    return arg_parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = _build_arg_parser().parse_args(argv)

    if args.tokens:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except OSError:
            print(f"Can't open file {args.file}")
            return 1
        for tok in scan(text):
            print(f"{tok.line}\t{tok.kind.name}\t{tok.text}")
        return 0

    executor = RecursiveDescentExecutor(args.file)
    try:
        root = executor.run()
    except OSError:
        print(f"Can't open file {args.file}")
        return 1
    except ParseError as exc:
        for message in exc.errors:
            print(message)
        return 1

    lines: List[str] = list(_tree_lines(root))
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())