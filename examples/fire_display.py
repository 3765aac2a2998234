"""Open a window showing the default 30x100 fire, redrawn every 30 ms."""

from firefx.fire_simulator.fire import create_simulator
from firefx.fire_simulator.visualizer import RealTimeVisualizer


if __name__ == "__main__":
    sim = create_simulator()
    viz = RealTimeVisualizer(sim)
    viz.start()
