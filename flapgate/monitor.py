import dataclasses
import time
from datetime import datetime

from flapgate import config
from flapgate.classifier import classify
from flapgate.clock import countdown
from flapgate.exceptions import NotificationPublishError
from flapgate.notify import format_message
from flapgate.vector import FlapState


@dataclasses.dataclass(frozen=True)
class MonitorState:
    last_observed: FlapState = FlapState.CLOSED


class MonitorLoop:
    """
    Classifies live readings and announces when the flap swings open.
    A notification goes out only when the flap leaves the closed position
    in a direction different from the last one seen. Sampling then pauses
    for the quiet period so a lingering pet does not trigger repeats.
    """

    def __init__(self, sampler, refs, publisher, sleep=time.sleep, clock=datetime.now,
                 quiet_period=config.QUIET_PERIOD, pet_name=config.PET_NAME, trace=False):
        self.sampler = sampler
        self.refs = refs
        self.publisher = publisher
        self.sleep = sleep
        self.clock = clock
        self.quiet_period = quiet_period
        self.pet_name = pet_name
        self.trace = trace

    def step(self, state):
        v = self.sampler.sample()
        current = classify(v, self.refs)
        if self.trace:
            print(v.row())
        if current is not FlapState.CLOSED and current is not state.last_observed:
            self.announce(current)
            print(v.row(current.label))
            print(f"[Monitor] Stopping measuring for {self.quiet_period} seconds.")
            countdown(self.quiet_period, self.sleep)
        return MonitorState(last_observed=current)

    def run(self, state=None):
        """
        Loops forever; only an escaping exception ends it.
        """
        state = state or MonitorState()
        print("[Monitor] Started.")
        while True:
            state = self.step(state)

    def announce(self, state):
        message = format_message(state, self.clock(), self.pet_name)
        try:
            self.publisher.publish(message)
        except NotificationPublishError as e:
            print(f"[Notify] Publish failed, skipping: {e}")
        else:
            print(f"[Notify] {message}")
