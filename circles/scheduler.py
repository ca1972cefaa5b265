import pygame


class ScheduledTask:
    """
    Handle for a callback queued on a FrameLoop.

    Cancelling is idempotent and a cancelled task never runs. Used as a context
    manager the task is cancelled on exit, whether or not it already fired.
    """

    def __init__(self, loop, callback, due=None):
        self._loop = loop
        self.callback = callback
        self.due = due  # None for frame requests
        self.cancelled = False
        self.done = False

    @property
    def pending(self):
        return not (self.cancelled or self.done)

    def cancel(self):
        if self.pending:
            self.cancelled = True
            self._loop._discard(self)

    def _run(self):
        self.done = True
        self.callback()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cancel()
        return False

    def __repr__(self):
        state = 'cancelled' if self.cancelled else ('done' if self.done else 'pending')
        kind = 'frame' if self.due is None else f'timer@{self.due}'
        return f"<ScheduledTask {kind} {state}>"


class FrameLoop:
    """
    Single-threaded cooperative queue for display-refresh and timer callbacks.

    The host calls :meth:`tick` once per display refresh. Due timers run first,
    then the frame callbacks that were requested before the tick began; frames
    requested from inside a tick wait for the next one, so frames never overlap.
    """

    def __init__(self, clock=None):
        self.clock = clock if clock is not None else pygame.time.get_ticks
        self._frames = []
        self._timers = []
        self.ticks = 0

    def now(self):
        return self.clock()

    def request_frame(self, callback):
        task = ScheduledTask(self, callback)
        self._frames.append(task)
        return task

    def call_later(self, delay_ms, callback):
        task = ScheduledTask(self, callback, due=self.now() + max(0, delay_ms))
        self._timers.append(task)
        return task

    def cancel(self, task):
        if task is not None:
            task.cancel()

    def _discard(self, task):
        queue = self._frames if task.due is None else self._timers
        if task in queue:
            queue.remove(task)

    def pending(self):
        return len(self._frames) + len(self._timers)

    def tick(self, now=None):
        if now is None:
            now = self.now()
        self.ticks += 1

        due = sorted((t for t in self._timers if t.due <= now), key=lambda t: t.due)
        for task in due:
            # an earlier callback in this tick may have cancelled it
            if task.pending:
                self._timers.remove(task)
                task._run()

        frames, self._frames = self._frames, []
        for task in frames:
            if task.pending:
                task._run()


class GeometryNotifier:
    """Fan-out of container size changes to subscribers (the host's resize observer)."""

    def __init__(self):
        self._subscribers = []

    def subscribe(self, callback):
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return unsubscribe

    def notify(self, container_box):
        for callback in list(self._subscribers):
            callback(container_box)

    def __len__(self):
        return len(self._subscribers)
