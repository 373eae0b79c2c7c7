'''
Export of the rendered wave: a looping animated GIF of every frame except the
one nearest the snapshot time, plus one high resolution still.
'''

import os
import time
from matplotlib.animation import PillowWriter


snapshot_template = "wave_bessel_snapshot_t_{t:.2f}.png"


class ExportState:
    '''Mutable state threaded through the frame loop.'''

    def __init__(self, out_dir: str = ".",
                 gif_filename: str = "wave_bessel_solution.gif",
                 delay_time: float = 0.2, snapshot_time: float = 2.0,
                 half_step: float = 0.02, snapshot_dpi: int = 300):
        self.out_dir = out_dir
        self.gif_path = os.path.join(out_dir, gif_filename)
        self.delay_time = delay_time
        self.snapshot_time = snapshot_time
        self.half_step = half_step
        self.snapshot_dpi = snapshot_dpi

        self.writer = None
        self.frames_written = 0
        self.snapshot_taken = False
        self.snapshot_path = None


def in_snapshot_window(t_n: float, snapshot_time: float, half_step: float) -> bool:
    '''True when t_n is within half a nominal step of the snapshot time.'''
    return abs(t_n - snapshot_time) <= half_step


def should_take_snapshot(state: ExportState, t_n: float) -> bool:
    '''True for the first sample at or after the snapshot time.'''
    return not state.snapshot_taken and t_n >= state.snapshot_time


def frame_plan(t, snapshot_time: float, half_step: float) -> list:
    '''(to_gif, snapshot) per sample; the two rules may pick different samples.'''

    plan = []
    taken = False
    for t_n in t:
        to_gif = not in_snapshot_window(t_n, snapshot_time, half_step)
        snap = not taken and t_n >= snapshot_time
        taken = taken or snap
        plan.append((to_gif, snap))
    return plan


def append_gif_frame(state: ExportState, fig) -> None:
    '''Grab the current figure as the next GIF frame.'''

    if state.writer is None:
        # first frame opens the animation, loops forever
        state.writer = PillowWriter(fps=1.0 / state.delay_time)
        state.writer.setup(fig, state.gif_path)
    state.writer.grab_frame()
    state.frames_written += 1


def save_snapshot(state: ExportState, fig, t_n: float) -> str:
    '''Write the still image for sample time t_n and mark it taken.'''

    path = os.path.join(state.out_dir, snapshot_template.format(t=t_n))
    fig.savefig(path, dpi=state.snapshot_dpi, facecolor="white")
    state.snapshot_taken = True
    state.snapshot_path = path
    print(f"Snapshot saved as {path}")
    return path


def export_frame(state: ExportState, renderer, Z, t_n: float,
                 pause_time: float = 0.0) -> None:
    '''Render one time sample and route it to the animation and/or snapshot.'''

    renderer.draw(Z, t_n)

    if not in_snapshot_window(t_n, state.snapshot_time, state.half_step):
        append_gif_frame(state, renderer.fig)

    if should_take_snapshot(state, t_n):
        save_snapshot(state, renderer.fig, t_n)

    if pause_time > 0:
        time.sleep(pause_time)


def finish_export(state: ExportState) -> ExportState:
    '''Finalise the GIF and report what was written.'''

    if state.writer is not None:
        state.writer.finish()
        print(f"Animation saved as {state.gif_path}")
    else:
        print(f"No frames left for the animation, {state.gif_path} not written")

    if not state.snapshot_taken:
        print(f"No sample reached t = {state.snapshot_time}, no snapshot written")

    return state


def run_export(renderer, field, t, state: ExportState,
               pause_time: float = 0.0) -> ExportState:
    '''Export every frame in time order from the tensor or (t_n, slice) pairs.'''

    os.makedirs(state.out_dir, exist_ok=True)

    if hasattr(field, "ndim"):
        slices = ((float(t_n), field[:, :, n]) for n, t_n in enumerate(t))
    else:
        slices = field

    for t_n, Z in slices:
        export_frame(state, renderer, Z, t_n, pause_time=pause_time)

    return finish_export(state)
