import argparse

from simulation.charts import final_charts
from simulation.sim import Simulation
from visualization.pygame.monitor import SimulationMonitor


def run():
    parser = argparse.ArgumentParser(description="Evolving birds and eagles, with an operator console")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--width", type=int, default=1400)
    parser.add_argument("--height", type=int, default=860)
    parser.add_argument("--charts-dir", type=str, default="simulation_results")
    parser.add_argument("--no-charts", action="store_true", help="skip fitness charts on exit")
    args = parser.parse_args()

    sim = Simulation(Simulation.default_config(), seed=args.seed)
    monitor = SimulationMonitor(sim, width=args.width, height=args.height, fps=args.fps)

    try:
        monitor.run()
        print("Simulation stopped by user")
    finally:
        monitor.cleanup()

    if not args.no_charts:
        # the handle may have been replaced by `reset`; chart whatever was running last
        final_charts(monitor.simulation, args.charts_dir)


if __name__ == "__main__":
    run()
