from simulation.config import Config

from .transcript import Transcript


def print_help(transcript: Transcript, config: Config):
    """Startup banner: commands, their parameters and the current defaults."""
    p = transcript.println

    p("=== flocksim ===")
    p("")
    p("---- Commands ----")
    p("")
    p("- p / pause")
    p("  Pauses (or resumes) the simulation")
    p("")
    p(f"- r / reset [animals={config.world_animals}] [f={config.world_foods}] [...]")
    p("  Starts simulation from scratch with given optional")
    p("  parameters:")
    p("")
    p(f"  * a / animals (default={config.world_animals})")
    p("    number of animals")
    p("")
    p(f"  * f / foods (default={config.world_foods})")
    p("    number of foods")
    p("")
    p(f"  * n / neurons (default={config.brain_neurons})")
    p("    number of brain neurons per each animal")
    p("")
    p(f"  * p / photoreceptors (default={config.eye_cells})")
    p("    number of eye cells per each animal")
    p("")
    p("  Examples:")
    p("    reset animals=100 foods=100")
    p("    r a=100 f=100")
    p("    r p=3")
    p("")
    p("- (t)rain [how-many-generations]")
    p("  Fast-forwards one or many generations, allowing to")
    p("  observe the learning process faster.")
    p("")
    p("  Examples:")
    p("    train")
    p("    t 5")
    p("")
    p("---- Advanced ----")
    p("")
    p("- `reset` can modify *all* of the parameters:")
    p("")
    p("  * r i:integer_param=123 f:float_param=123")
    p("  * r a=200 f=200 f:food_size=0.002")
    p("")
    p("  Parameter names:")
    for name, value in config.as_dict().items():
        prefix = "i:" if isinstance(value, int) else "f:"
        p(f"    {prefix}{name} (default={value:g})")
    p("")
