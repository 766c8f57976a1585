"""Command-line entry point: decode FEN/PGN text and list piece targets."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chessmoves.core.notation import (
    STARTING_FEN,
    FenRecord,
    NotationError,
    PgnGame,
    parse_fen,
    parse_pgn,
)
from chessmoves.core.piece import Piece
from chessmoves.core.types import SQUARE_COUNT, Coord
from chessmoves.render import RenderOptions, render_fen_board

_LOGGER = logging.getLogger(__name__)

SAMPLE_PGN = """
[Event "F/S Return Match"]
[Site "Belgrade, Serbia JUG"]
[Date "1992.11.04"]
[Round "29"]
[White "Fischer, Robert J."]
[Black "Spassky, Boris V."]
[Result "1/2-1/2"]

1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 Nf6 5. O-O Be7 6. Re1 b5 7. Bb3 d6 8. c3 O-O
9. h3 Nb8 10. d4 Nbd7 11. c4 c6 12. cxb5 axb5 13. Nc3 Bb7 14. Bg5 b4 15.Nb1 h6
16. Bh4 c5 17. dxe5 Nxe4 18. Bxe7 Qxe7 19. exd6 Qf6 20. Nbd2 Nxd6 21.Nc4 Nxc4
22. Bxc4 Nb6 23. Ne5 Rae8 24. Bxf7+ Rxf7 25. Nxf7 Rxe1+ 26. Qxe1 Kxf7 27. Qe3 Qg5
28. Qxg5 hxg5 29. b3 Ke6 30. a3 Kd6 31. axb4 cxb4 32. Ra5 Nd5 33.f3 Bc8 34. Kf2 Bf5
35. Ra7 g6 36. Ra6+ Kc5 37. Ke1 Nf4 38. g3 Nxh3 39. Kd2 Kb5 40. Rd6 Kc5 41. Ra6
Nf2 42. g4 Bd3 43. Re6 1/2-1/2
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmoves",
        description="Decode FEN/PGN text and explore piece movement shapes.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        help="Enable debug logging.",
        action="store_true",
    )
    parser.add_argument(
        "--ascii",
        help="Draw pieces as FEN letters instead of Unicode symbols.",
        action="store_true",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    fen = commands.add_parser("fen", help="Decode a FEN record.")
    fen.add_argument(
        "record",
        help="FEN record. Default is the standard start position.",
        nargs="?",
        default=STARTING_FEN,
    )

    pgn = commands.add_parser("pgn", help="Decode a PGN game.")
    pgn.add_argument(
        "path",
        help="PGN file, or '-' for stdin. Default is a bundled sample game.",
        nargs="?",
        default=None,
    )

    targets = commands.add_parser(
        "targets", help="List squares a piece can reach from a square index."
    )
    targets.add_argument("piece", help="FEN piece letter, e.g. N or q.", type=str)
    targets.add_argument("index", help="Source square index (0-63).", type=int)
    return parser


# ── Commands ─────────────────────────────────────────────────────────────


def format_fen(record: FenRecord, options: RenderOptions) -> str:
    lines = [
        f"Active color: {record.active_color}",
        f"Castling: {record.castling}",
        f"En passant: {record.en_passant}",
        f"Halfmove clock: {record.halfmove_clock}",
        f"Fullmove number: {record.fullmove_number}",
        "Board:",
        render_fen_board(record, options),
    ]
    return "\n".join(lines)


def format_pgn(game: PgnGame) -> str:
    lines = ["Tags:"]
    lines.extend(f"{key}: {value}" for key, value in game.tags.items())
    lines.append("")
    lines.append("Moves:")
    lines.extend(
        f"{number}. {pair.white} {pair.black}"
        for number, pair in enumerate(game.moves, start=1)
    )
    return "\n".join(lines)


def _read_pgn(path: str | None) -> str:
    if path is None:
        return SAMPLE_PGN
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _run_targets(piece_char: str, index: int) -> str:
    piece = Piece.from_char(piece_char)
    source = Coord.from_index(index)
    return "\n".join(str(coord) for coord in piece.available_targets(source))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = RenderOptions(unicode=not args.ascii)

    try:
        if args.command == "fen":
            output = format_fen(parse_fen(args.record), options)
        elif args.command == "pgn":
            output = format_pgn(parse_pgn(_read_pgn(args.path)))
        else:
            if not 0 <= args.index < SQUARE_COUNT:
                parser.error(f"index must be in 0..{SQUARE_COUNT - 1}")
            output = _run_targets(args.piece, args.index)
    except NotationError as exc:
        _LOGGER.debug("Decode failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
