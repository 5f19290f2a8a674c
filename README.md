# rmd_actuator

Building blocks for talking to RMD-X series actuators over a CAN bus.

## What is in the package

- `rmd_actuator.constants`: the rated specifications of each actuator model.
  Each model is an `ActuatorConstants` record (reducer ratio, rated speed,
  current, power and torque, rotor inertia, and where known the no-load speed,
  speed constant and number of pole pairs). The `torque_constant` property is
  the rated torque divided by the rated current. Models are available as
  module attributes (`X4V2`, `X8_90`, `X15_400`, ...), in the read-only
  mapping `ACTUATORS`, and through `actuator_constants(name)`, which raises
  `KeyError` for an unknown name.
- `rmd_actuator.state`: the enums `AccelerationType`, `CanBaudRate`,
  `ControlMode` and `ErrorCode`, and the records `PiGains`, `Gains`,
  `MotorStatus1`, `MotorStatus2` and `MotorStatus3`. `Feedback` is another
  name for `MotorStatus2`. Gains are unsigned bytes; `PiGains` raises
  `ValueError` for values outside 0 to 255 and `TypeError` for non-integers.
  `Gains.from_values` builds the gains from six individual values.
- `rmd_actuator.message`: `Message`, an 8-byte payload. `set_at` and
  `get_as` write and read little-endian integers of a given size and
  signedness; they raise `IndexError` when the range leaves the payload and
  `set_at` raises `ValueError` when the value does not fit.
- `rmd_actuator.driver`: the `Driver` interface (`add_id`, `send`,
  `send_recv`), the `CanBus` interface (`write`, `read`, `set_recv_filter`),
  `CanNode`, which maps actuator ids to CAN ids by fixed offsets,
  `SocketCanBus`, a Linux SocketCAN bus usable as a context manager, and
  `CanDriver`, a `CanNode` with the actuators' request offset `0x140` and
  response offset `0x240`. Failures are raised as `DriverError`.
- `rmd_actuator.responses`: decoding of actuator replies:
  `FeedbackResponse.status`, `GainsResponse.gains`,
  `GetControlModeResponse.mode` and `MultiTurnEncoderPositionResponse.position`.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.
`SocketCanBus` needs Linux and a configured CAN interface (for example
`can0`, or a virtual `vcan0` for experiments).

## Example

```python
from rmd_actuator.constants import actuator_constants
from rmd_actuator.responses import FeedbackResponse
from rmd_actuator.state import Gains

spec = actuator_constants("X8V2")
print(spec.rated_torque, spec.torque_constant)

gains = Gains.from_values(100, 100, 50, 40, 50, 50)
print(gains.speed.kp)  # 50

reply = FeedbackResponse(bytes([0xA1, 25, 0x64, 0x00, 0x0A, 0x00, 0x2D, 0x00]))
print(reply.status)  # temperature 25, current 1.0 A, speed 10.0 dps, angle 45.0 deg
```

Talking to actuators on a bus:

```python
from rmd_actuator.driver import CanDriver

driver = CanDriver("can0")   # or CanDriver(some_can_bus)
driver.add_id(1)             # receive replies from CAN id 0x241
reply_bytes = driver.send_recv(request_message, 1)  # sent to CAN id 0x141
```

Actuator ids run from 1 to 32; `add_id` raises `DriverError` for others and
installs a receive filter for all ids registered so far. Any object that
implements `CanBus` can stand in for the SocketCAN bus, which is useful for
testing without hardware.

## What the package does not do

- It does not build request messages for actuator commands (reading
  angles, setting speed, position or torque, and so on); a request is any
  `Message` whose bytes the caller fills in.
- It decodes only the four reply types listed above.
- It has no high-level object that wraps one actuator, and no command-line
  tool.

## Running the tests

```
pip install .[test]
pytest
```