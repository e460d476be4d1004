import pytest

from console.errors import ArityError, CommandSyntaxError, InvalidValueError, UnknownCommandError
from console.interpreter import BRACKETS_MESSAGE, CommandInterpreter

from conftest import FakeSimulation


@pytest.fixture
def interpreter(playback, transcript):
    return CommandInterpreter(playback, transcript)


def test_submit_echoes_input(interpreter, transcript):
    interpreter.submit("p")
    assert transcript.lines == ["", "$ p"]


@pytest.mark.parametrize("cmd", ["p", "pause"])
def test_pause_twice_restores_active_flag(interpreter, playback, cmd):
    interpreter.submit(cmd)
    assert playback.active is False
    interpreter.submit(cmd)
    assert playback.active is True


def test_pause_with_argument_is_an_error(interpreter, playback, transcript):
    interpreter.submit("pause extra")

    assert playback.active is True
    assert transcript.lines[-1] == "  ^ err: this command accepts no parameters"
    with pytest.raises(ArityError):
        interpreter.execute("p now")


def test_train_three_generations(interpreter, playback, transcript):
    interpreter.submit("t 3")

    assert playback.simulation.train_calls == 3
    output = transcript.lines[2:]
    assert output == [
        "generation 0:", "birds: ok",
        "",
        "generation 1:", "birds: ok",
        "",
        "generation 2:", "birds: ok",
    ]
    assert output.count("") == 2


def test_train_defaults_to_one_generation(interpreter, playback, transcript):
    interpreter.submit("train")
    assert playback.simulation.train_calls == 1
    assert "" not in transcript.lines[2:]


def test_train_runs_while_paused(interpreter, playback):
    interpreter.submit("p")
    interpreter.submit("t 2")
    assert playback.simulation.train_calls == 2
    assert playback.active is False


def test_train_with_two_arguments_is_an_error(interpreter, playback, transcript):
    interpreter.submit("t 1 2")
    assert playback.simulation.train_calls == 0
    assert transcript.lines[-1] == "  ^ err: this command accepts at most one parameter"


@pytest.mark.parametrize("line", ["t abc", "t 0", "t -4"])
def test_train_rejects_bad_generation_counts(interpreter, playback, line):
    with pytest.raises(InvalidValueError):
        interpreter.execute(line)
    assert playback.simulation.train_calls == 0


def test_reset_with_aliases_installs_new_simulation(interpreter, playback, fake_sim):
    interpreter.submit("r a=50 f=30 n=5 p=2")

    sim = playback.simulation
    assert sim is not fake_sim
    assert isinstance(sim, FakeSimulation)
    cfg = sim.config()
    assert (cfg.world_animals, cfg.world_foods, cfg.brain_neurons, cfg.eye_cells) == (50, 30, 5, 2)
    assert cfg.food_size == FakeSimulation.default_config().food_size


def test_reset_with_generic_fields(interpreter, playback):
    interpreter.submit("reset i:sim_generation_length=7 f:food_size=0.5")

    cfg = playback.simulation.config()
    defaults = FakeSimulation.default_config()
    assert cfg.sim_generation_length == 7
    assert cfg.food_size == 0.5
    assert cfg.world_animals == defaults.world_animals
    assert cfg.eye_cells == defaults.eye_cells


def test_reset_without_arguments_uses_defaults(interpreter, playback, fake_sim):
    interpreter.submit("reset")
    assert playback.simulation is not fake_sim
    assert playback.simulation.config() == FakeSimulation.default_config()


def test_brackets_are_rejected_before_anything_runs(interpreter, playback, fake_sim, transcript):
    interpreter.submit("r [a=1]")

    assert playback.simulation is fake_sim
    assert transcript.lines[-1] == f"  ^ err: {BRACKETS_MESSAGE}"
    with pytest.raises(CommandSyntaxError):
        interpreter.execute("t ]")


@pytest.mark.parametrize("line", ["r a=1 x=2", "r i:bogus=1", "r a=abc", "r a=0"])
def test_failed_reset_keeps_current_simulation(interpreter, playback, fake_sim, transcript, line):
    interpreter.submit(line)

    assert playback.simulation is fake_sim
    assert transcript.lines[-1].startswith("  ^ err: ")


def test_reset_reports_engine_message(interpreter, transcript):
    interpreter.submit("r i:bogus=1")
    assert transcript.lines[-1] == "  ^ err: unknown config field: bogus"


@pytest.mark.parametrize("line", ["jump", "P", "resets", ""])
def test_unknown_command(interpreter, line):
    with pytest.raises(UnknownCommandError, match="unknown command"):
        interpreter.execute(line)


def test_unknown_command_is_reported(interpreter, transcript):
    interpreter.submit("fly away")
    assert transcript.lines == ["", "$ fly away", "  ^ err: unknown command"]


def test_engine_failure_during_train_is_reported(interpreter, playback, transcript):
    def broken():
        raise RuntimeError("engine exploded")

    playback.simulation.train = broken
    interpreter.submit("t")
    assert transcript.lines[-1] == "  ^ err: engine exploded"


def test_extra_whitespace_between_arguments(interpreter, playback):
    interpreter.submit("r   a=3    f=4")
    assert playback.simulation.config().world_animals == 3
    assert playback.simulation.config().world_foods == 4
