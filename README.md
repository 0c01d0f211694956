# pinesim

Desktop stand-ins for the hardware and RTOS services that smartwatch code
expects. Use them to run and test device-level logic on a host machine with
no device attached. Everything is plain Python with no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To install the test tools as well, add the `test` extra:

```
pip install ".[test]"
```

## What is included

### RTOS primitives

- `pinesim.portmacro`: the constants `PORT_MAX_DELAY`, `PD_FALSE`, `PD_TRUE`,
  `PD_PASS` and `PORT_NRF_RTC_REG`, and `port_yield_from_isr`.
- `pinesim.task`: `task_get_tick_count` counts ticks at 1024 Hz from the
  first time it is called. `task_delay` sleeps, with one tick taken as one
  millisecond. `task_create` runs a function on a daemon thread and returns a
  `TaskHandle`, and `TaskHandle.join` waits for that thread. There is also
  `task_notify_give`, which always returns `PD_PASS`. Three more are fixed:
  `task_get_current_task_handle` returns an empty handle,
  `task_get_scheduler_state` returns `SchedulerState.NOT_STARTED`, and
  `task_get_system_state` returns an empty list. The enums `TaskState` and
  `NotifyAction` and the `TaskStatus` record are defined here as well.
- `pinesim.msgqueue`: `MessageQueue` is a thread-safe FIFO of single bytes,
  and its `item_size` must be 1. `send` and `send_from_isr` always succeed.
  `receive(ticks_to_wait)` returns the front byte. If nothing arrives, it waits
  in 25-tick steps and returns `None`.
- `pinesim.timers`: `Timer` is a one-shot or auto-reloading software timer.
  It calls `callback(timer)` on expiry and offers `start`, `stop`, `reset`,
  `change_period`, `expiry_time` and `is_active`. The module also provides
  `ms_to_ticks` and `ticks_to_ms`.
- `pinesim.app_timer`: `AppTimer` takes a `TimerMode`, either `SINGLE_SHOT`
  or `REPEATED`, and calls `handler(context)` on each expiry. It also provides
  `app_timer_ticks` and `app_timer_init`.
- `pinesim.delay`: `delay_ms`.
- `pinesim.rtc`: `rtc_counter_get` returns the tick count for
  `PORT_NRF_RTC_REG` and raises `ValueError` for any other register.
- `pinesim.nrflog`: `log_error`, `log_warning`, `log_info` and `log_debug`
  write printf-style messages to stdout, each with a level prefix.

### Peripherals

- `pinesim.gpio`: `GpioSimulator` reads the button pin from a callable that
  returns a mouse-button mask; the right button counts as pressed. It also
  tracks the vibration motor, which is active low. The module defines
  `PinPull` and `GpioteInConfig` too.
- `pinesim.twi_master`: `TwiMaster` models each device on the bus as a bank
  of byte registers. Registers that were never written read as zero. A single
  write holds at most 16 bytes.
- `pinesim.spi_master`: `SpiMaster` accepts every transfer, and its reads
  return zero bytes.
- `pinesim.spi_nor_flash`: `SpiNorFlash` is a 4 MiB flash memory kept in a
  file on the host. `read` and `write` are bounds-checked, and it works as a
  context manager.
- `pinesim.hrs3300`: `Hrs3300` is the heart rate sensor driver, working
  through a `TwiMaster`.
- `pinesim.bma421`: `Bma421` is the accelerometer. It reports no motion, and
  its step count is the public `steps` attribute.
- `pinesim.cst816s`: `Cst816S` turns mouse state into touch samples. It
  detects single taps, long presses of more than one second, and slides in the
  four directions.
- `pinesim.watchdog`: `Watchdog` and `WatchdogView`. The reset reason is
  always `ResetReason.RESET_PIN` after `setup`. `reset_reason_to_string` gives
  readable names.
- `pinesim.heart_rate_task`: `HeartRateTask` receives `Message` values
  through a `MessageQueue`. `work()` handles the waiting messages by enabling
  or disabling the sensor.

## Example

```python
from pinesim.msgqueue import MessageQueue
from pinesim.spi_nor_flash import SpiNorFlash
from pinesim.timers import Timer, ms_to_ticks

queue = MessageQueue(10, 1)
queue.send(42, 0)
print(queue.receive(100))  # 42

with SpiNorFlash("flash.bin") as flash:
    flash.write(0x100, b"hello")
    print(flash.read(0x100, 5))  # b'hello'

timer = Timer("blink", ms_to_ticks(500), True, None, lambda t: print("tick"))
timer.start(0)
timer.stop(0)
```

## What it does not do

- There is no window, display or command-line program. The caller supplies
  mouse input to `GpioSimulator` and `Cst816S` as callables.
- There is no real scheduler. Tasks are plain threads and priorities are
  ignored.
- The sensors produce no real measurements. `HeartRateTask` does not compute
  a heart rate, and `Bma421` reports zero acceleration.
- `SpiNorFlash.sector_erase` leaves the stored contents as they are.

## Running the tests

```
pytest
```