# fwos

`fwos` is a small simulated firewall control plane. It loads a default rule
set and pushes a batch of synthetic network flows through a pool of worker
threads. Each flow is evaluated, tracked as a session, counted and written
to an audit trail. At the end the run prints a summary of the verdicts.

## Running the simulation

```
fwos-x
```

The command takes no options. A run goes through these steps:

1. It prints `[FWOS] booting distributed firewall OS`.
2. It prints three cluster messages: leader elected, heartbeat service
   started, and policy replication enabled.
3. It loads the two default deny rules and prints `[POLICY] loaded 2 rules`:
   - destination `10.0.0.1`, `tcp`, port `443`
   - destination `8.8.8.8`, `udp`, port `53`
4. It builds 50 flows, with sources `10.1.1.0` to `10.1.1.49`. Flows whose
   number is a multiple of seven go to `10.0.0.1` and the rest go to
   `8.8.8.8`. Even-numbered flows use `tcp` port `443` and odd-numbered
   flows use `udp` port `53`.
5. It evaluates these flows on four worker threads and pauses 40 ms after
   each one. For each flow it prints a `[SESSION]`, an `[AUDIT]` and a
   `[TRACE]` line. The order of the lines depends on thread scheduling. An
   exception in a worker is reported on standard error as
   `[ERROR] worker exception: ...`.
6. It waits for every flow to finish. It then prints the allowed and denied
   counts (25 and 25 for the default batch) and `[FWOS] shutdown complete`.

All console output goes through `fwos.console.emit`. This function writes
one line under a shared lock, so lines from different threads never
interleave.

## Using the pieces from Python

```python
from fwos.policy import Flow, PolicyEngine
from fwos.metrics import Metrics
from fwos.sessions import SessionTable

engine = PolicyEngine()
engine.load_default_rules()

flow = Flow(src_ip="10.1.1.3", dst_ip="8.8.8.8", protocol="udp", port=53)
allowed = engine.evaluate(flow)   # False: matches a deny rule

metrics = Metrics()
metrics.record_packet(allowed)
print(metrics.summary())          # the text that print_summary() writes

sessions = SessionTable()
sessions.track(flow)
sessions.count(flow)              # 1
len(sessions)                     # number of distinct sessions
```

A `Rule` matches on destination address, protocol and port. Rules are
checked in order and the first match decides the verdict: a rule whose
action is `"DENY"` denies the flow, and any other action allows it. A flow
that matches no rule is allowed. Sessions are keyed on the source and
destination addresses together.

The run can also be driven from code. `ControlPlane` takes `flow_count`,
`worker_count` and `pause` (seconds per flow; `0` disables the pause).
`run()` returns the `Metrics` it filled:

```python
from fwos.control_plane import ControlPlane, make_flow

plane = ControlPlane(flow_count=10, worker_count=2, pause=0)
plane.initialize()
metrics = plane.run()
print(metrics.allowed, metrics.denied)

make_flow(7)   # Flow(src_ip='10.1.1.7', dst_ip='10.0.0.1', protocol='udp', port=53)
```

The other modules:

- `fwos.workers`
  - `ThreadPool(count)` runs queued callables on `count` threads.
    `shutdown()` finishes every queued task and waits for the threads. A
    call to `enqueue` after shutdown raises `RuntimeError`. The pool is also
    a context manager that shuts down on exit.
  - `BlockingQueue` is a thread-safe FIFO whose `pop()` waits until an item
    is available.
- `fwos.engine`
  - `NodeCluster.elect_leader()` elects the first node added with
    `add_node`. It returns `""` when there are no nodes.
  - `DistributedPolicy` is a key/value policy cache; unknown keys read as
    `""`.
  - `AddressPolicy.evaluate(src_ip, dst_ip)` denies traffic to `10.0.0.1`
    and allows everything else.
- `fwos.config`
  - `ConfigEngine` is an in-memory key/value store; unknown keys read as
    `""`.
  - `WriteAheadLog(path="fwos.wal")` appends each entry as one line to the
    file.
- `fwos.security`
  - `SAMLValidator.validate(xml)` accepts any text that contains
    `<Assertion`.
  - `SSHServer(accounts)` checks a user and password against an account
    table. It has one built-in account, `admin`, when no table is given.
  - `TLSLifecycle.init()` and `handshake()` print a status line and return
    `True`.
- `fwos.audit`: `AuditLogger.log(flow, allowed)` writes one `[AUDIT]` line.
- `fwos.cluster`: `ClusterManager.bootstrap()` prints the cluster start-up
  messages.

## What this package does not do

Everything here is a simulation. It does not capture, inspect or filter real
network traffic, and the flows are generated in code. The cluster has no
networking, heartbeats or replication: `ClusterManager` only prints
messages, and `NodeCluster` elects its leader locally. `SSHServer` opens no
port and only checks credentials. `SAMLValidator` does no parsing or
signature checking. `TLSLifecycle` performs no TLS. Configuration is held
in memory only. `WriteAheadLog` appends to its file but never reads it back.