# mcpbridge

mcpbridge gives one interface to two messaging backends:

- **slack**: contexts are channels. `list` shows them as `#channel`. For
  sending and receiving, the leading `#` is optional. Sending posts a message
  to the channel. Receiving reads the five most recent messages of the
  channel's history.
- **github**: contexts are repositories, written as `owner/repo`. Any other
  form is rejected with `context should be in owner/repo format`. Sending adds
  a comment to the first issue that the repository's issue listing returns.
  Receiving reads the comments on that issue.

The package has two commands. `mcpcli` is a command-line tool. `mcpapi` is a
small REST API server.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Credentials

| Server  | Variable       |
|---------|----------------|
| slack   | `SLACK_TOKEN`  |
| github  | `GITHUB_TOKEN` |

Library code can pass a token in the `config` mapping given to `connect`:
`{"token": ...}`. When there is no token there, `connect` reads the variable in
the table above. Both commands always use the environment variable.

## Command line

Choose the backend with `--server` / `-s`. The option can go before or after
the command:

```
mcpcli -s slack connect
mcpcli list -s slack
mcpcli -s slack send -c "#general" -m "Hello from mcpbridge"
mcpcli -s github recv -c octo-org/octo-repo
```

- `connect` checks the credentials and prints which account they belong to.
  On failure it prints `Connect error: ...`.
- `list` prints `Contexts:`, then one ` - <context>` line per context. On
  failure it prints `List error: ...`.
- `send` needs `--context`/`-c` and `--message`/`-m`. On failure it prints
  `Send error: ...`.
- `recv` needs `--context`/`-c`. It prints each message as
  `[time] user: text`. On failure it prints `Receive error: ...`.

The commands other than `connect` try to connect first and ignore a failed
connection. The command itself then reports the error. An unknown server name
prints `Unknown server: <name>`. Run with no command, `mcpcli` prints its help.

## REST API

Start the server:

```
mcpapi
```

The server listens on all interfaces. The port comes from the `PORT`
environment variable. If `PORT` is not set, the port is 8080.

| Method | Path                                             | Response body                |
|--------|--------------------------------------------------|------------------------------|
| GET    | `/api/v1/<server>/contexts`                      | one context per line         |
| POST   | `/api/v1/<server>/send?context=...&message=...`  | `OK`                         |
| GET    | `/api/v1/<server>/receive?context=...`           | `[time] user: text` per line |

Every response is plain text. The server replies with status 400 in these
cases:

- the server name is unknown (`Unknown server: <name>`);
- a required query parameter is missing (`Missing context or message` or
  `Missing context`).

It replies with status 500 and the error text when the backend reports an
error. The error is `not connected to ...` when the token is missing or was
refused.

`create_app()` in `mcpbridge.api` registers both backends and returns the
Flask application without starting a server.

## Library use

```python
from mcpbridge.registry import register_server, get_server, list_servers
from mcpbridge.slack import SlackServer

register_server(SlackServer())
server = get_server("slack")
server.connect({"token": "token"})
for message in server.receive_messages("#general"):
    print(message.time, message.user, message.text)
```

`get_server` returns `None` for an unknown name. `list_servers` returns the
registered names. `GithubServer` and `SlackServer` each take an optional
`requests.Session`, which they use for all HTTP calls.

Messages are `mcpbridge.types.Message` objects with these fields:

- `context`
- `user`
- `text`
- `time`

`str(message)` gives `[time] user: text`. For Slack, `time` is the message
timestamp as Slack gives it. For GitHub, `time` is the comment's creation time
in UTC, written as `YYYY-MM-DD HH:MM:SS +0000 UTC`.

A backend is a subclass of `mcpbridge.types.Server`. It has a `name`, and it
implements these methods:

- `connect(config)`
- `list_contexts()`
- `send_message(context, message)`
- `receive_messages(context)`

Failures raise `mcpbridge.types.MCPError`.

## Limitations

- Receiving reads the messages once and returns. It does not wait for new
  messages.
- If the history or comments cannot be read after the context has been
  resolved, `receive_messages` yields nothing. No error is raised.
- The REST API has no authentication of its own. It cannot take tokens per
  request.
- `mcpapi` runs Flask's built-in development server. For production, serve the
  application from `create_app()` with a WSGI server.