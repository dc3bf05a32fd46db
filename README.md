# drrsim

drrsim provides building blocks for simulating an LTE downlink scheduler.
It covers the following parts:

* the radio standard tables;
* the COST231 path-loss channel;
* moving user equipment;
* packet queues with exponentially distributed arrivals;
* the scheduler settings.

You can take settings from a built-in scenario or load them from a YAML
file. The package checks them for consistency.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## The radio standard (`drrsim.standards`)

`StandardManager` holds the tables of one or more standards and answers
lookups against the current one. `default_standards()` returns the built-in
LTE tables, which cover:

* TTI and channel-sync intervals;
* the mapping from CQI to MCS;
* the SINR thresholds for each CQI;
* the number of resource blocks for each bandwidth;
* scheduler names, mobility directions, area types and per-TTI user limits.

```python
from drrsim.standards import StandardManager, default_standards

standard = StandardManager(default_standards(), "LTE")   # same as StandardManager()

standard.tti("1ms")                              # 0.001 seconds
standard.rb_number_from_bandwidth(5)             # 25 resource blocks
standard.cqi_efficiency(7)                       # useful bits per resource element
standard.resource_block_effective_data_size(7)   # useful bytes per resource block
standard.cqi_from_sinr(10.0)                     # CQI for a SINR in dB
standard.mobility_direction(1)                   # "forward"
```

The manager raises `UnknownParameterError`, a subclass of `LookupError`, for a
key the standard does not define. Such a key can be a TTI name, a sync
interval, a CQI, a bandwidth, a direction id or a standard name.
`cqi_from_sinr` never raises. It picks the first threshold at or above the
SINR. If the SINR is above every threshold, it returns the highest CQI.

The module also defines the constants `EPSILON`, `BS_TO_UE_DISTANCE_MIN`,
`BS_TO_UE_DISTANCE_MAX` and `THROUGHPUT_MIN`.

## Channel and geometry (`drrsim.channel`, `drrsim.position`)

```python
from drrsim.channel import Channel
from drrsim.position import Position

channel = Channel(2000, 46, "Dense Urban")   # MHz, dB, area type
bs = Position(0, 0, 25)
ue = Position(8000, 8000, 1.5)

loss = channel.path_loss(bs.distance_2d(ue), bs.z, ue.z)
received = channel.received_signal_power(loss)
sinr = channel.sinr(received, channel.noise_power(), channel.interference_power())
```

The area type must be `"Dense Urban"`, `"Urban"` or `"Suburban"`. Any other
value raises `ValueError`. The channel computes noise as thermal noise over
20 MHz at 290 K. It takes interference as zero.

`drrsim.position` also provides the `Mobility` dataclass, which holds a speed
in km/h and a direction, and `BaseStation`.

## Users (`drrsim.user`)

`User` gives itself a sequential id. `User.reset_last_id()` restarts the
numbering so that the next user gets id 1. A user keeps the following:

* a CQI;
* a position and a mobility;
* a PF priority;
* a DRR quant and deficit;
* an exponential moving average of its throughput, with alpha = 2 / (N + 1).

`User.move(seconds)` moves the user along its direction. The move is limited
by the 1–20 km ring around the origin. A `"random"` direction draws a
direction from the user's `UserGenerator`. `pf_sort_key(user)` gives an
ordering that puts higher priority first, then lower average throughput.

## Traffic (`drrsim.generators`, `drrsim.packet`)

* `TimeGenerator(rate, seed)` produces increasing arrival times with
  exponentially distributed gaps. `reset_time()` starts them again from zero.
* `UserGenerator(user_count, direction_count, seed)` draws user ids and
  movement direction ids uniformly from inclusive ranges.
* `PacketQueue(quant, limit, time_generator)` orders packets by arrival time.
  `schedule_packet` stamps a packet with the next arrival time and enqueues
  it. It drops the packet silently once the queue holds `limit` packets. The
  queue's `deficit` ignores values above 1,000,000.
* `RelevantPacketQueue` orders packets by their user's priority, highest
  first. Packets whose priorities are nearly equal are ordered by arrival
  time.

Both queues support `front()`, `pop()`, `push()` and `len()`. `dump(file)`
writes the packets in service order without changing the queue. With no file,
it writes to standard output.

## Settings (`drrsim.settings`, `drrsim.scenarios`, `drrsim.validation`)

`Settings` is a dataclass that holds one scenario's parameters. The
`BSConfig` and `UserConfig` dataclasses describe the base station and the
users. `basic_scenario_settings()` returns a ready-made scenario with one
queue, one user and the `DefaultPFScheduler`:

```python
from drrsim.scenarios import basic_scenario_settings
from drrsim.standards import StandardManager
from drrsim.validation import validate_settings, validate_scheduler_specific_parameters

standard = StandardManager()
settings = basic_scenario_settings()
validate_settings(settings, standard)
validate_scheduler_specific_parameters(settings)

settings.tti_value(standard)                      # 0.001
settings.channel_sync_interval_value(standard)    # 0.01
settings.resource_block_per_tti_limit(standard)   # 25
settings.packet_size_limit(standard)              # largest packet in bytes
```

`validate_settings` returns the matching `StandardInfo`. It raises
`ValueError` for the first problem it finds. It checks the following:

* an unknown standard, scheduler, TTI, sync interval, CQI or bandwidth;
* a packet size outside the range that one TTI can carry;
* a base station that is not at `(0, 0, 25)`;
* a user outside the 1–20 km ring or outside the height range 1.5–22.5 m;
* a negative user speed;
* a bad mobility direction or user quant;
* a throughput history size outside 0–10000;
* an unknown area type;
* a carrier frequency outside 700–3000 MHz;
* a transmission power other than 43, 46 or 49 dB;
* a per-TTI user limit other than 4 or 8.

`validate_scheduler_specific_parameters` adds two sets of rules:

* The PF scheduler requires base CQI 1 and exactly one queue.
* The round-robin and DRR schedulers require a base CQI in 1–15.

### Loading a scenario from YAML (`drrsim.loader`)

`load_settings_from_yaml(filename, scenario_dir)` reads `filename` from
`scenario_dir`. The default directory is `./scenarios/yaml/`. A missing or
mistyped key raises `ValueError`. A scenario file looks like this:

```yaml
launches: 1
standard_type: LTE
scheduler_type: DefaultDRRScheduler
area_type: Urban
tti_duration: 1ms
channel_sync_interval: 10ms
carrier_frequency: 2000
bs_transmission_power: 46
bandwidth: 5
base_cqi: 7
packet_count: 100
packet_size: 159
time_lambda: 1500
queue_count: 2
queue_quant: 100
queue_limit: 10000
users_per_tti_limit: 4
throughput_history_size: 2000
bs_config:
  x: 0
  y: 0
  z: 25
user_configs:
  - {x: 8000, y: 8000, z: 1.5, speed: 3, direction: random, quant: 10}
  - {x: 2000, y: 0, z: 1.5, speed: 0, direction: forward, quant: 10}
```

```python
from drrsim.loader import load_settings_from_yaml

settings = load_settings_from_yaml("urban.yaml", "scenarios/yaml")
```

## What the package does not do

The package knows the scheduler names only as strings that validation
accepts. It lacks the following:

* the schedulers themselves, which would serve the queues TTI by TTI;
* a driver that runs repeated launches;
* the per-run and averaged statistics, such as delays, fairness, throughput
  and confidence intervals;
* plotting;
* a command-line program.