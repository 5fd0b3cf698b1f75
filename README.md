# udpnotifier

Send short text notifications to every machine on the local network over
UDP broadcast, and receive them as they arrive.

Each message goes out as a single UTF-8 datagram, by default to
`255.255.255.255` on port 12345. The sender can optionally keep a journal of
what it sent, with timestamps, in a SQLite file. Receivers bind to the same
port with address reuse switched on, so several listeners can share it, and
print every message they get.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Command line

Start a receiver on each machine that should get notifications:

```
udpnotifier-receive
```

Options:

- `--port PORT`: port to listen on (default 12345)
- `--host HOST`: address to listen on (default `0.0.0.0`)
- `--timeout SECONDS`: stop after this long without a message; without it
  the receiver runs until interrupted

Broadcast a message from any machine on the network:

```
udpnotifier-send "Server maintenance starts in 10 minutes"
```

If no messages are given on the command line, one message is read from each
line of standard input. Options:

- `--port PORT`: destination port (default 12345)
- `--address ADDRESS`: destination address (default `255.255.255.255`)
- `--db FILE`: SQLite file in which to journal every message sent

Empty messages are refused. The command prints `Sent: <message>` for each
message that went out, reports failures on standard error, and exits with
status 1 if any message failed.

## Library use

Sending, with a journal:

```python
from udpnotifier.event_log import EventLog
from udpnotifier.sender import Broadcaster

with EventLog("events.db") as log, Broadcaster(log=log) as broadcaster:
    broadcaster.send("Backup finished")
    for entry_id, message, timestamp in log.entries():
        print(entry_id, message, timestamp)
```

`Broadcaster.send` returns the number of bytes sent. It raises
`EmptyMessageError` (a `ValueError`) for an empty message and `SendError`
(an `OSError`) when the datagram cannot be sent; a message is journalled
only after it has been sent. `EventLog` creates its `logs` table when it is
missing, stores timestamps as `YYYY-MM-DD HH:MM:SS` (see
`format_timestamp`), and defaults to an in-memory database.

Receiving:

```python
from udpnotifier.receiver import Receiver

with Receiver() as receiver:
    for message in receiver.messages(timeout=5.0):
        print(message)
```

`Receiver.receive(timeout)` waits for one datagram and returns its text, or
`None` when the timeout passes; bytes that are not valid UTF-8 are replaced.

### Showing messages one at a time

`udpnotifier.messages.Message` holds a title, text, a `MessageIcon` and a
display delay in milliseconds.

`udpnotifier.tray_queue.TrayMessageQueue` is given the callables that do
the actual showing: `show`, an optional `fallback` used when
`tray_available()` returns false, and an optional timer factory. A message
added with no delay gets the queue's default of 3000 ms. The first message
is shown at once; while more are waiting, the next one follows after the
previous message's delay plus 500 ms.

`udpnotifier.show_worker.MessageShowWorker` takes messages from a shared
`collections.deque` on a background thread (`start` / `stop`), calls `show`
for each, waits for its delay, and calls `clear` once the deque is empty.

`udpnotifier.receiver.popup_position` computes where to place a pop-up of a
given size in the bottom-right corner of a screen area, 20 pixels in from
each edge.

## What it does not do

The package has no graphical window, desktop pop-up or system-tray icon of
its own: `udpnotifier-receive` prints messages to standard output, and the
queue and worker classes only call the display functions you pass them.
The journal is a local SQLite file, not a database server.

## Tests

```
pip install .[test]
pytest
```