import os

import numpy as np

from .sim import Simulation


def final_charts(sim: Simulation, output_dir: str = "simulation_results"):
    """Save fitness-per-generation charts for the simulation that was running at exit."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    if not sim.history:
        print("No generations completed, nothing to plot")
        return

    os.makedirs(output_dir, exist_ok=True)
    generations = np.array([s.generation for s in sim.history])

    # 1. Per-species fitness evolution
    for species in ("birds", "eagles"):
        stats = [getattr(s, species) for s in sim.history]
        plt.figure(figsize=(10, 6), dpi=150)
        plt.plot(generations, [s.max_fitness for s in stats], lw=2, color="#2ca02c", label="max")
        plt.plot(generations, [s.avg_fitness for s in stats], lw=3, color="#1f77b4", label="avg")
        plt.plot(generations, [s.median_fitness for s in stats], lw=2, color="#9467bd", label="median")
        plt.plot(generations, [s.min_fitness for s in stats], lw=2, color="#d62728", label="min")
        plt.title(f"{species.capitalize()} Fitness - {len(sim.history)} Generations", fontsize=16, fontweight='bold')
        plt.xlabel("Generation", fontsize=12)
        plt.ylabel("Fitness (foods eaten)" if species == "birds" else "Fitness (birds caught)", fontsize=12)
        plt.legend()
        plt.grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(f"{output_dir}/{species}_fitness.png", dpi=150, bbox_inches='tight')
        plt.close()

    # 2. Side by side averages
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5), dpi=150)
    ax1.plot(generations, [s.birds.avg_fitness for s in sim.history], lw=2, color='#1f77b4')
    ax1.set_title("Birds (avg)", fontweight='bold')
    ax1.set_xlabel("Generation")
    ax1.grid(True, alpha=0.3)
    ax2.plot(generations, [s.eagles.avg_fitness for s in sim.history], lw=2, color='#17becf')
    ax2.set_title("Eagles (avg)", fontweight='bold')
    ax2.set_xlabel("Generation")
    ax2.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(f"{output_dir}/summary_statistics.png", dpi=150, bbox_inches='tight')
    plt.close(fig)

    last = sim.history[-1]
    print(f"\n=== SIMULATION SUMMARY ===")
    print(f"Generations completed: {len(sim.history)}")
    print(f"Final birds fitness: {last.birds}")
    print(f"Final eagles fitness: {last.eagles}")
    print(f"Charts saved to '{output_dir}/'")
    print("========================\n")
