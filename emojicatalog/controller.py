# SPDX-License-Identifier: MIT
"""
Interaction controller: turns control changes into filter/sort/render cycles.
"""

from . import logger
from .engine import apply_controls, unique_categories
from .loader import load
from .state import CatalogState, Controls
from .view import CatalogView

from dataclasses import replace
from enum import Enum
from typing import Callable, Optional
import time

LOAD_ERROR_MESSAGE = (
    "Failed to load emoji data. Please check the JSON file URL and try again."
)


class ControllerState(Enum):
    IDLE = "idle"
    RECOMPUTING = "recomputing"


class CatalogController:
    """
    Owns the catalog state of one session and keeps the view in sync with it.

    Recomputation cycles are handed to ``defer`` after the progress indicator
    is shown. Every cycle gets a generation number; a cycle that finishes
    after a newer one was scheduled is dropped instead of rendered.
    """

    def __init__(
        self,
        view: CatalogView,
        defer: Optional[Callable[[Callable[[], None]], None]] = None,
        reveal_delay: float = 0.0,
        recompute_delay: float = 0.0,
    ):
        self.view = view
        self.state = CatalogState()
        self.status = ControllerState.IDLE
        self.ready = False
        self.reveal_delay = reveal_delay
        self.recompute_delay = recompute_delay
        self._defer = defer or self._run_now
        self._generation = 0

    def _run_now(self, cycle: Callable[[], None]):
        if self.recompute_delay > 0:
            time.sleep(self.recompute_delay)
        cycle()

    def start(self, url: str) -> bool:
        """
        Load the catalog and show it.

        :returns: False if loading failed; the view then shows an error and
            the controls stay inactive.
        """
        logger.debug("Initializing emoji catalog...")

        result = load(url, indicator=self.view, reveal_delay=self.reveal_delay)
        if not result.ok:
            self.view.render_error(LOAD_ERROR_MESSAGE)
            return False

        self.state = CatalogState(
            all_records=result.records,
            visible_records=result.records,
        )
        self.view.populate_categories(unique_categories(result.records))
        self.view.render_cards(self.state.visible_records)
        self.ready = True

        logger.debug(f"Loaded {len(result.records)} emojis successfully!")
        return True

    # Controls

    def _update_controls(self, **changes) -> bool:
        if not self.ready:
            logger.warning("Catalog is not loaded, ignoring input")
            return False
        self.state.controls = replace(self.state.controls, **changes)
        return True

    def set_search(self, text: str):
        if self._update_controls(search_term=text):
            self.schedule_recompute()

    def set_category(self, category: str):
        if self._update_controls(category=category):
            self.schedule_recompute()

    def set_sort(self, order: str):
        if self._update_controls(sort_order=order):
            self.schedule_recompute()

    def submit_search(self):
        """Re-run the current controls, as when Enter is pressed in the search field."""
        if not self.ready:
            logger.warning("Catalog is not loaded, ignoring input")
            return
        self.schedule_recompute()

    # Cycles

    def schedule_recompute(self):
        self._generation += 1
        generation = self._generation

        self.status = ControllerState.RECOMPUTING
        self.view.show_progress()
        self._defer(lambda: self._recompute(generation))

    def _recompute(self, generation: int):
        if generation != self._generation:
            logger.debug(f"Dropping stale recompute cycle {generation}")
            return

        self.state.visible_records = apply_controls(
            self.state.all_records, self.state.controls
        )
        self.view.render_cards(self.state.visible_records)
        self.status = ControllerState.IDLE

    def clear_filters(self):
        """Reset all controls and show the whole catalog right away."""
        if not self.ready:
            return

        # invalidate cycles that are still pending
        self._generation += 1
        self.state.controls = Controls()
        self.state.visible_records = self.state.all_records
        self.view.render_cards(self.state.visible_records)
        self.status = ControllerState.IDLE
