import board
import adafruit_adxl34x

from flapgate import config
from flapgate.exceptions import SensorIOError
from flapgate.vector import Vector3

# adafruit drivers report m/s^2
STANDARD_GRAVITY = 9.80665

RANGES = {
    2: adafruit_adxl34x.Range.RANGE_2_G,
    4: adafruit_adxl34x.Range.RANGE_4_G,
    8: adafruit_adxl34x.Range.RANGE_8_G,
    16: adafruit_adxl34x.Range.RANGE_16_G,
}


class Accelerometer:
    def __init__(self, range_g=config.GRAVITY_RANGE_G):
        try:
            self.i2c = board.I2C()
            self.sensor = adafruit_adxl34x.ADXL345(self.i2c)
            self.sensor.range = RANGES[range_g]
        except (OSError, ValueError, RuntimeError) as e:
            raise SensorIOError(f"ADXL345 init failed: {e}") from e
        print(f"[Hardware] ADXL345 Initialized (+/-{range_g}g).")

    def read_once(self):
        """
        One raw reading in g.
        """
        try:
            ax, ay, az = self.sensor.acceleration
        except (OSError, RuntimeError) as e:
            raise SensorIOError(f"ADXL345 read failed: {e}") from e
        return Vector3(ax / STANDARD_GRAVITY, ay / STANDARD_GRAVITY, az / STANDARD_GRAVITY)
