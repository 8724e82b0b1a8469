import math
import os
import sys
import time
import argparse

import matplotlib.pyplot as plt

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lattice_lab.config import SearchMode
from lattice_lab.errors import OutOfWorkspaceError
from lattice_lab.planning.planners import create_planner
from lattice_lab.planning.tour import TourPlanner
from lattice_lab.types import Configuration
from lattice_lab.visualization.observers import DebugObserver, ExperimentObserver
from lattice_lab.visualization.plotter import plot_plan_result
from experiments.benchmark_config import BenchmarkConfig as cfg

MODES = {"bfs": SearchMode.BFS, "dijkstra": SearchMode.DIJKSTRA}


def ensure_log_dir(log_dir):
    os.makedirs(log_dir, exist_ok=True)


def print_rows(result):
    """每行输出 u v V q(deg)"""
    for u, v, speed, q in result.rows():
        print(f"{u:.3f} {v:.3f} {speed:.3f} {math.degrees(q):.3f}")


def run_single(config, debug=False, plot=False):
    planner = create_planner(config)
    observer = DebugObserver(log_dir=os.path.join(cfg.LOG_DIR, "debug")) if debug else ExperimentObserver()

    t0 = time.perf_counter()
    try:
        result = planner.plan(debugger=observer)
    except OutOfWorkspaceError as e:
        print(f"Setup rejected: {e}")
        return None
    finally:
        if debug:
            observer.close()
    duration_ms = (time.perf_counter() - t0) * 1000

    print(f"Planning Finished. Found: {result.found} ({result.reason}), "
          f"Cost: {result.cost}, Expansions: {result.expansions}, Time: {duration_ms:.2f} ms")
    if result.found:
        print_rows(result)

    if plot:
        ensure_log_dir(cfg.LOG_DIR)
        ax = plot_plan_result(result, config, observer=observer)
        outfile = os.path.join(cfg.LOG_DIR, f"lattice_{config.mode.name.lower()}_{'succ' if result.found else 'fail'}.png")
        ax.figure.savefig(outfile)
        plt.close(ax.figure)
        print(f"Visualization saved to: {outfile}")
    return result


def run_tour(mode, plot=False):
    base = cfg.tour_base(mode=mode)
    planner = TourPlanner(base, fixed_bounds=False)
    waypoints = cfg.tour_waypoints()

    t0 = time.perf_counter()
    tour = planner.plan_tour(waypoints)
    t1 = time.perf_counter()

    for i, leg in enumerate(tour.legs):
        print(f"Leg {i}: found={leg.found} cost={leg.cost} expansions={leg.expansions}")
    print(f"Tour Finished. Found: {tour.found}, Total cost: {tour.total_cost}, Time: {t1 - t0:.2f}s")

    if plot and tour.configurations:
        ensure_log_dir(cfg.LOG_DIR)
        fig, ax = plt.subplots(figsize=(10, 6))
        ax.plot([c.u for c in tour.configurations], [c.v for c in tour.configurations], 'b-', linewidth=2)
        ax.plot([w.u for w in waypoints], [w.v for w in waypoints], 'rx', markersize=10)
        ax.set_aspect('equal')
        ax.set_title(f"Sub-goal tour | {mode.name}")
        outfile = os.path.join(cfg.LOG_DIR, f"tour_{mode.name.lower()}.png")
        fig.savefig(outfile)
        plt.close(fig)
        print(f"Visualization saved to: {outfile}")
    return tour


def run_experiment(scenario="basic", mode="bfs", debug=False, plot=False):
    print(f"=== Running Experiment (Scenario={scenario}, Mode={mode}) ===")
    search_mode = MODES[mode]
    weights = cfg.TURN_WEIGHTS if search_mode == SearchMode.DIJKSTRA else None

    if scenario == "basic":
        return run_single(cfg.basic(mode=search_mode, rate_weights=weights), debug, plot)
    elif scenario == "unreachable":
        return run_single(cfg.unreachable(mode=search_mode, rate_weights=weights), debug, plot)
    elif scenario == "outside":
        outside = Configuration(cfg.BOUNDS.u_max + 0.5, 0.0, 0.0)
        return run_single(cfg.basic(mode=search_mode, goal=outside), debug, plot)
    elif scenario == "tour":
        return run_tour(search_mode, plot)
    else:
        raise ValueError(f"Unknown scenario: {scenario}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--scenario", type=str, default="basic",
                        choices=["basic", "unreachable", "outside", "tour"], help="Scenario to run")
    parser.add_argument("--mode", type=str, default="bfs", choices=list(MODES), help="Search mode")
    parser.add_argument("--debug", action="store_true", help="Write a debug log")
    parser.add_argument("--plot", action="store_true", help="Save a plot under logs/")
    args = parser.parse_args()

    run_experiment(args.scenario, args.mode, args.debug, args.plot)
