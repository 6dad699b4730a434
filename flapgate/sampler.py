import time

from flapgate import config
from flapgate.vector import Vector3


class VectorSampler:
    """
    Averages a burst of raw readings to smooth out flap vibration.
    Sensor errors are not caught here; they end the run.
    """

    def __init__(self, sensor, count=config.SAMPLE_COUNT, delay=config.SAMPLE_DELAY,
                 sleep=time.sleep):
        if count < 1:
            raise ValueError("count must be at least 1")
        self.sensor = sensor
        self.count = count
        self.delay = delay
        self.sleep = sleep

    def sample(self):
        total = Vector3()
        for _ in range(self.count):
            total = total + self.sensor.read_once()
            self.sleep(self.delay)
        return total / self.count
