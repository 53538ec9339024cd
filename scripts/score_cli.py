"""
Interactive text front end for a darts scoring session.

Commands:
    add NAME          add NAME to the game (and the roster)
    rm NAME           remove NAME from the game
    save NAME         add NAME to the saved roster only
    select NAME       select NAME on the roster
    throw N [NAME]    record N points (default: active participant)
    hit X Y           click the board at canvas coordinates X, Y
    next              end the active turn early
    undo              undo the last throw
    show              print the score table
    quit

Usage:
    python scripts/score_cli.py
    python scripts/score_cli.py --config config/darts.yaml --canvas 360 360
"""
import sys
import argparse
import shlex
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from darts_score.core import Config
from darts_score.board import DartboardMapper, build_board_geometry
from darts_score.game import GameSession, RosterStore
import logging

logger = logging.getLogger(__name__)


def render(session: GameSession) -> str:
    """Format the round table as plain text."""
    lines = []
    header = "".join(
        f"{('*' if h.is_current else '') + str(h.number):>6}" for h in session.round_headers
    )
    lines.append(f"{'':<14}{'Total':>7}{header}")

    for p in session.participants:
        marker = ">" if p.is_active else " "
        cells = "".join(f"{e.display_total:>6}" for e in p.round_scores)
        lines.append(f"{marker}{p.name:<13}{p.score:>7}{cells}")

    if session.has_participants:
        lines.append(
            f"Round {session.current_round_index + 1} | "
            f"{session.active_participant_name} to throw, {session.throws_left} left"
        )
    else:
        lines.append("No participants. Use 'add NAME'.")
    return "\n".join(lines)


def handle(session: GameSession, mapper: DartboardMapper, line: str) -> bool:
    """
    Execute one command line.

    Returns:
        False when the user asked to quit
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        print(f"Parse error: {e}")
        return True

    if not parts:
        return True

    cmd, args = parts[0].lower(), parts[1:]

    if cmd in ("quit", "exit", "q"):
        return False

    elif cmd == "add" and args:
        session.add_participant(" ".join(args))

    elif cmd == "rm" and args:
        participant = session.table.find(" ".join(args))
        if not session.remove_participant(participant):
            print("No such participant")

    elif cmd == "save" and args:
        session.add_player(" ".join(args))

    elif cmd == "select" and args:
        session.select_player(" ".join(args))
        print(f"Selected {session.roster.selected} ({session.selected_player_score} pts)")

    elif cmd == "throw" and args:
        try:
            points = int(args[0])
        except ValueError:
            print("Points must be an integer")
            return True
        player = " ".join(args[1:]) or session.target_player()
        if session.record_throw(player, points) is None:
            print("Nothing recorded")

    elif cmd == "hit" and len(args) == 2:
        try:
            x, y = float(args[0]), float(args[1])
        except ValueError:
            print("Coordinates must be numbers")
            return True
        hit = mapper.pixel_to_score(x, y)
        print(f"{hit.label} → {hit.points}")
        session.throw(hit.points)

    elif cmd == "next":
        session.advance_turn()

    elif cmd == "undo":
        if not session.undo_last():
            print("Nothing to undo")

    elif cmd != "show":
        print(__doc__.split("Usage:")[0].strip())
        return True

    print(render(session))
    return True


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Darts score keeper")

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML"
    )

    parser.add_argument(
        "--roster",
        type=Path,
        default=None,
        help="Roster file (overrides storage.roster_path)"
    )

    parser.add_argument(
        "--canvas",
        type=float,
        nargs=2,
        default=(360.0, 360.0),
        metavar=("WIDTH", "HEIGHT"),
        help="Board canvas size for 'hit' commands"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = Config(args.config)
    store = RosterStore(args.roster or config.roster_path)
    session = GameSession(config=config, store=store)

    mapper = DartboardMapper(
        canvas_size=tuple(args.canvas),
        board_geometry=build_board_geometry(config.get_section("board")),
    )

    if session.roster.entries:
        print("Saved players: " + ", ".join(session.roster.names))
    print(render(session))

    while True:
        try:
            line = input("darts> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not handle(session, mapper, line):
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
