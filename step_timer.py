"""
StepTimer: fixed-rate tick source built on pygame's event timer.

pygame posts one timer event per interval onto the event queue; the event
loop hands those events back to the timer, which calls the registered
callback. The owner only starts and stops the timer.
"""
import pygame


class StepTimer:
    def __init__(self, interval_ms, callback, event_type=None):
        self.interval_ms = interval_ms
        self.callback = callback
        # Each timer gets its own user event type unless one is supplied
        self.event_type = event_type if event_type is not None else pygame.event.custom_type()
        self._running = False

    def start(self):
        """
        Begin posting tick events every interval_ms milliseconds. Ticks left
        in the queue from an earlier run are discarded first.
        """
        pygame.event.clear(self.event_type)
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self._running = True

    def stop(self):
        """Stop posting tick events; a zero interval cancels the pygame timer."""
        pygame.time.set_timer(self.event_type, 0)
        self._running = False

    def is_running(self):
        return self._running

    def handles(self, event):
        return event.type == self.event_type

    def fire(self):
        """
        Deliver one tick to the callback. Ticks still queued after stop()
        are dropped here, so a stopped timer never reaches its owner.
        """
        if not self._running:
            return False
        self.callback()
        return True
