import matplotlib as mpl
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
import numpy as np

from firefx.fire_simulator.fire import FireSim


class RealTimeVisualizer:
    """Displays a running FireSim in a matplotlib window.

    A FuncAnimation calls `update` every ``params.frame_interval_ms`` and the
    image is redrawn from the simulator's RGB buffer.
    """

    def __init__(self, sim: FireSim, render=True):
        self.render = render

        if not self.render:
            mpl.use('Agg')  # Use a non-interactive backend if not rendering

        self.sim = sim
        self.anim = None

        self.fig, self.ax = plt.subplots(figsize=(3, 6))
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("FireFX")
        self.ax.set_axis_off()
        self.image = self.ax.imshow(self.sim.renderer.frame_image(), interpolation='nearest')

    def set_sim(self, sim: FireSim):
        self.sim = sim
        self.image.set_data(self.sim.renderer.frame_image())

        # Refit the image and axes when the grid size changes
        rows, cols = sim.shape
        self.image.set_extent((-0.5, cols - 0.5, rows - 0.5, -0.5))
        self.ax.set_xlim(-0.5, cols - 0.5)
        self.ax.set_ylim(rows - 0.5, -0.5)

    def update(self, *args):
        self.sim.update()
        self.image.set_data(self.sim.renderer.frame_image())
        return (self.image,)

    def snapshot(self) -> np.ndarray:
        """Copy of the frame currently shown."""
        return np.array(self.image.get_array(), dtype=np.uint8)

    def start(self, num_frames=None):
        print(f"Starting fire display at {self.sim.params.frame_interval_ms} ms per frame...")
        self.anim = FuncAnimation(self.fig, self.update, frames=num_frames,
                                  interval=self.sim.params.frame_interval_ms,
                                  blit=True, cache_frame_data=False)
        if self.render:
            plt.show()

        return self.anim

    def close(self):
        plt.close(self.fig)
