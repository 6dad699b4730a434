import time

from flapgate import config
from flapgate.clock import countdown
from flapgate.vector import ReferenceSet


def wait_for_operator(message):
    input(message)


class Calibrator:
    """
    Interactive capture of the three reference vectors.
    Order is closed -> outside -> inside; a mistimed capture is fixed by
    running calibration again.
    """

    def __init__(self, sampler, store, sleep=time.sleep, gate=wait_for_operator,
                 settle=config.SETTLE_SECONDS, cooldown=config.CALIBRATION_COOLDOWN):
        self.sampler = sampler
        self.store = store
        self.sleep = sleep
        self.gate = gate
        self.settle = settle
        self.cooldown = cooldown

    def run(self):
        self.gate("[Calibration] Press Enter to start calibration")
        print("[Calibration] Start calibration...")

        print("[Calibration] Read values for state [closed]...")
        closed = self.sampler.sample()
        print(f"[Calibration] [CLOSED] {self._describe(closed)}")

        print("[Calibration] Open flap to OUTside and wait...")
        countdown(self.settle, self.sleep)
        outside = self.sampler.sample()
        print(f"[Calibration] [OUT] {self._describe(outside)}")

        print("[Calibration] Open flap to INside and wait...")
        countdown(self.settle, self.sleep)
        inside = self.sampler.sample()
        print(f"[Calibration] [IN] {self._describe(inside)}")

        refs = ReferenceSet(closed=closed, inside=inside, outside=outside)
        self.store.save(refs)
        print("[Calibration] Calibration completed. The Gate is ready.")

        print()
        print(f"{'State':>7} {'X (g)':>5} {'Y (g)':>5} {'Z (g)':>5}")
        countdown(self.cooldown, self.sleep, "{} second/s until starting...")
        return refs

    @staticmethod
    def _describe(v):
        return f"X:{v.x:.2f} Y:{v.y:.2f} Z:{v.z:.2f}g"
