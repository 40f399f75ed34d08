#!/usr/bin/env python3
"""
Gravity Sandbox application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame viewport thread that steps and draws the
  simulation, and the Dear PyGui controls window (running on the main thread).
- Builds one Simulation and one InteractionController and hands both to the
  viewport and the controls; there is no module-level simulation state.

Threading model
- ViewportRenderer runs in a background thread and performs: pointer handling
  (body creation), stepping physics and drawing. Pointer handling and stepping
  happen on this thread only, so they never interleave.
- ControlsUI runs in the main thread via Dear PyGui and only calls Simulation
  methods, which take the Simulation lock. The pause toggle holds that lock
  across its check and flip, and the interaction controller holds it while
  it pauses for a new body, so the two threads cannot interleave there.

Interaction
- Press and drag on the viewport to size a new body, release, then drag again
  to aim it and release to launch it. The simulation pauses while a body is
  being created.
- Space toggles pause, S steps a single frame while paused.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python gravity_sim.py`
"""

import logging
import threading
from typing import Tuple

import pygame
import dearpygui.dearpygui as dpg

from gravity import config
from gravity.canvas import PygameCanvas
from gravity.constants import HUD_TEXT_COLOR, VIEW_HEIGHT, VIEW_MARGIN, VIEW_WIDTH
from gravity.interaction import Aiming, InteractionController, Sizing
from gravity.logging_config import setup_logging
from gravity.presets_loader import list_templates, load_scene
from gravity.simulation import Simulation

logger = logging.getLogger("gravity.app")


def fit_window_size(desktop: Tuple[int, int]) -> Tuple[int, int]:
    """Window size that fits the desktop minus VIEW_MARGIN, capped at the default view."""
    w = desktop[0] - VIEW_MARGIN[0]
    h = desktop[1] - VIEW_MARGIN[1]
    if w <= 0 or h <= 0:
        return (VIEW_WIDTH, VIEW_HEIGHT)
    return (min(w, VIEW_WIDTH), min(h, VIEW_HEIGHT))


class ViewportRenderer(threading.Thread):
    """
    Pygame loop: feeds pointer events to the interaction controller, steps
    the simulation and draws it once per frame.
    """
    def __init__(self, sim: Simulation, interaction: InteractionController, fps: int = config.FPS):
        super().__init__(daemon=True)
        self.sim = sim
        self.interaction = interaction
        self.fps = fps
        self.canvas = None
        self.clock = None
        self.font = None
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Gravity Sandbox - Viewport")
        info = pygame.display.Info()
        size = fit_window_size((info.current_w, info.current_h))
        self.canvas = PygameCanvas(pygame.display.set_mode(size, pygame.RESIZABLE))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 20)
        logger.info("Viewport %dx%d at %d FPS", size[0], size[1], self.fps)

        while self.running:
            self.handle_events()
            self.sim.step()
            self.draw()
            self.clock.tick(self.fps)

        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.canvas = PygameCanvas(pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE))

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.interaction.pointer_down(event.pos)

            elif event.type == pygame.MOUSEMOTION:
                self.interaction.pointer_move(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.interaction.pointer_up(event.pos)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    toggle_pause(self.sim, self.interaction)
                elif event.key == pygame.K_s and self.sim.is_paused():
                    self.sim.step_once()

    def draw(self):
        self.sim.render(self.canvas)
        self.interaction.render(self.canvas)
        self.draw_text(status_line(self.sim, self.interaction), 10, 10)
        pygame.display.flip()

    def draw_text(self, text, x, y):
        img = self.font.render(text, True, HUD_TEXT_COLOR)
        self.canvas.surface.blit(img, (x, y))


def toggle_pause(sim: Simulation, interaction: InteractionController) -> bool:
    """
    Flip Running/Paused. Ignored while a body is being created, since the
    interaction resumes the simulation itself on launch.
    Returns True if the state changed.
    """
    with sim.lock:
        if interaction.pending_body is not None:
            return False
        if sim.is_paused():
            sim.resume()
        else:
            sim.pause()
        return True


def status_line(sim: Simulation, interaction: InteractionController) -> str:
    with sim.lock:
        state = interaction.state
        paused = sim.paused
        count = len(sim.bodies)
        frame = sim.frame
    if isinstance(state, Sizing):
        mode = "Sizing: drag to set radius, release to fix it"
    elif isinstance(state, Aiming):
        mode = "Aiming: drag to set direction, release to launch"
    else:
        mode = "Paused" if paused else "Running"
    return f"Bodies: {count}  Frame: {frame}  [{mode}]"


# ============================================================
# Dear PyGui UI
# ============================================================

class ControlsUI:
    """
    Dear PyGui interface: pause/resume, single step, scene templates, status.
    """
    def __init__(self, sim: Simulation, interaction: InteractionController):
        self.sim = sim
        self.interaction = interaction
        self._template_map = {display: name for name, display in list_templates()}
        self.status_id = None
        self.play_button_id = None

        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (~10Hz)."""
        dpg.set_frame_callback(dpg.get_frame_count() + 6, self._sync_ui_with_sim)

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Gravity Sandbox - Controls', width=380, height=220)

        with dpg.window(label="Controls", width=360, height=200, pos=(10, 10), tag="main_window"):
            with dpg.group(horizontal=True):
                dpg.add_text("Scene:")
                items = list(self._template_map.keys())
                dpg.add_combo(items,
                              default_value=items[0] if items else "",
                              width=180,
                              tag="scene_combo")
                dpg.add_button(label="Load", callback=lambda: self.load_template(dpg.get_value("scene_combo")))

            dpg.add_separator()

            with dpg.group(horizontal=True):
                self.play_button_id = dpg.add_button(label="Pause", width=80, callback=self._toggle_play)
                dpg.add_button(label="Step", width=80, callback=self._step_once)

            dpg.add_separator()
            self.status_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()

    def _toggle_play(self):
        toggle_pause(self.sim, self.interaction)

    def _step_once(self):
        with self.sim.lock:
            if self.sim.is_paused():
                self.sim.step_once()

    def load_template(self, display_name: str):
        name = self._template_map.get(display_name, display_name)
        self.sim.replace_bodies(load_scene(name))

    def _sync_ui_with_sim(self):
        dpg.set_value(self.status_id, status_line(self.sim, self.interaction))
        dpg.set_item_label(self.play_button_id, "Resume" if self.sim.is_paused() else "Pause")
        self._schedule_sync()


def main():
    setup_logging()

    sim = Simulation(load_scene(config.TEMPLATE))
    interaction = InteractionController(sim)

    renderer = ViewportRenderer(sim, interaction)
    renderer.start()

    ControlsUI(sim, interaction)

    try:
        while dpg.is_dearpygui_running() and renderer.is_alive():
            dpg.render_dearpygui_frame()
    finally:
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()


if __name__ == "__main__":
    main()
