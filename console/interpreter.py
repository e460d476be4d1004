from typing import List

from .errors import ArityError, CommandSyntaxError, InvalidValueError, UnknownCommandError
from .overrides import parse_int, parse_overrides
from .playback import PlaybackController
from .transcript import Transcript

BRACKETS_MESSAGE = (
    "square brackets are just for documentation purposes - "
    "you don't have to write them, e.g.: reset animals=100"
)


class CommandInterpreter:
    def __init__(self, playback: PlaybackController, transcript: Transcript):
        self.playback = playback
        self.transcript = transcript
        self.commands = {
            "p": self.exec_pause,
            "pause": self.exec_pause,
            "r": self.exec_reset,
            "reset": self.exec_reset,
            "t": self.exec_train,
            "train": self.exec_train,
        }

    def submit(self, line: str):
        """Echo ``line``, run it, and report any failure in the transcript."""
        self.transcript.println("")
        self.transcript.println("$ " + line)
        try:
            self.execute(line)
        except Exception as err:
            self.transcript.println(f"  ^ err: {err}")

    def execute(self, line: str):
        if "[" in line or "]" in line:
            raise CommandSyntaxError(BRACKETS_MESSAGE)

        tokens = line.split()
        if not tokens or tokens[0] not in self.commands:
            raise UnknownCommandError("unknown command")

        cmd, args = tokens[0], tokens[1:]
        self.commands[cmd](args)

    def exec_pause(self, args: List[str]):
        if args:
            raise ArityError("this command accepts no parameters")
        self.playback.toggle()

    def exec_reset(self, args: List[str]):
        defaults = self.playback.factory.default_config()
        config = parse_overrides(defaults, args)
        self.playback.reset(config)

    def exec_train(self, args: List[str]):
        if len(args) > 1:
            raise ArityError("this command accepts at most one parameter")

        generations = parse_int("generations", args[0]) if args else 1
        if generations < 1:
            raise InvalidValueError(f"generations must be at least 1, got {generations}")

        self.playback.train(generations)
