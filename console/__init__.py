"""
Operator console for the simulation.

Provides:
    - Transcript (append-only operator log)
    - CommandInterpreter (pause / reset / train commands)
    - PlaybackController (active flag, stepping, training, reset)
    - parse_overrides (``name=value`` tokens to a Config)
"""

from .transcript import Transcript
from .playback import PlaybackController
from .interpreter import CommandInterpreter
from .overrides import parse_overrides
from .help import print_help

__all__ = ["Transcript", "PlaybackController", "CommandInterpreter", "parse_overrides", "print_help"]
