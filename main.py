"""
Console front end for TicTacToe.

Play against the AI in a terminal:
- Type "row col" (e.g. "1 1") to place your marker
- "r" restarts, "q" quits

Run this script to play TicTacToe against the computer!
"""

import logging
import sys
from typing import Optional, TextIO

from tictactoe.ai_player import Difficulty
from tictactoe.board import Owner
from tictactoe.config import GameConfig
from tictactoe.session import GameSession, INVALID_MOVE

log = logging.getLogger("tictactoe.console")


class ConsoleGame:
    """
    Main controller for a terminal game.

    Game flow:
    1. Human (X by default) types a move
    2. AI replies at the chosen difficulty
    3. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.HARD,
        human_player: Owner = Owner.PLAYER_X,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        self.difficulty = difficulty
        self.human_player = human_player
        self.ai_player = human_player.opposite()
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout
        self.session = GameSession()
        self.is_running = False

    def _print(self, text: str = ""):
        print(text, file=self.output)

    def start(self):
        """Start the game."""
        self._print("\nStarting TicTacToe game...")
        self._print(f"Human plays: {self.human_player.marker}  AI plays: {self.ai_player.marker}"
                    f"  Difficulty: {self.difficulty.name}")
        self._print("Type 'row col' to move, 'r' to restart, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.session.game_over():
                self._show_game_result()
                if not self._ask_play_again():
                    break
                continue

            if self.session.game.current_player == self.ai_player:
                self._ai_move()
                continue

            self._print(self.session.game.render())
            self._print(f"\n{self.session.get_state()}")
            line = self._read_line("Your move: ")
            if line is None:
                break
            self._handle_command(line)

    def _read_line(self, prompt: str) -> Optional[str]:
        self.output.write(prompt)
        self.output.flush()
        line = self.input.readline()
        if not line:
            return None  # EOF
        return line.strip()

    def _handle_command(self, line: str):
        """
        Handle one line of user input.

        Args:
            line: "q", "r" or "row col".
        """
        command = line.lower()
        if command in ("q", "quit"):
            self._print("\nGame quit by user.")
            self.is_running = False
            return
        if command in ("r", "restart"):
            self._reset_game()
            return

        parts = line.replace(",", " ").split()
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            self._print("Please type a row and a column, e.g. '1 2'.")
            return

        row, col = int(parts[0]), int(parts[1])
        self._process_human_move(row, col)

    def _process_human_move(self, row: int, col: int):
        """Play a move typed by the human."""
        log.info("Human plays (%d, %d)", row, col)
        if not self.session.do_move(row, col):
            if self.session.last_error == INVALID_MOVE:
                self._print(f"Cannot play ({row}, {col}). Pick an empty cell 0-{GameConfig.BOARD_SIZE - 1}.")

    def _ai_move(self):
        """Let the AI play."""
        log.info("AI is thinking...")
        if self.session.do_ai_move(self.difficulty):
            self._print(f"\n>>> AI played. {self.session.get_state()}")
        else:
            self._print(f"ERROR: AI could not move ({self.session.last_error})")
            self.is_running = False

    def _show_game_result(self):
        """Show the final game result."""
        self._print("\n" + "=" * 40)
        self._print("   GAME OVER!")
        self._print("=" * 40)
        self._print(self.session.game.render())

        winner = self.session.winner()
        if winner is None:
            self._print("\nIt's a draw! Good game!")
        elif winner == self.human_player:
            self._print("\nCongratulations! You won!")
        else:
            self._print("\nAI wins! Better luck next time!")

    def _ask_play_again(self) -> bool:
        answer = self._read_line("Play again? [y/N] ")
        if answer is not None and answer.lower() in ("y", "yes"):
            self._reset_game()
            return True
        return False

    def _reset_game(self):
        """Reset the game for a new round."""
        self.session.restart()
        self._print("Game reset!\n")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        default=GameConfig.DEFAULT_DIFFICULTY,
        choices=[d.name.lower() for d in Difficulty],
        help="AI strength (default: %(default)s)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT
    )

    human_player = Owner.PLAYER_O if args.ai_first else Owner.PLAYER_X
    game = ConsoleGame(
        difficulty=Difficulty.parse(args.difficulty),
        human_player=human_player
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
