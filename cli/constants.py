"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = [
    "use-token", "container", "new-container", "get", "put", "rm",
    "token", "new-token", "reports", "report", "clear", "exit", "help",
]

PASSWORD_OPTION = "--password"

STYLE = Style.from_dict(
    {
        "prompt": "#2E8B57 bold",
        "command": "#0088ff bold",
    }
)

WELCOME_TITLE = "Strongbox CLI - password-protected containers"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "strongbox> "

HELP_TEXT = """Available commands:
  use-token <token>                           Save a creation token for new-container
  container <id>                              Show container info and files
  new-container [token]                       Create a container (uses saved token if omitted)
  get <container> <path> [output]             Print a file, or save it to output
  put <container> <path> <local-file>         Upload a local file to path
  rm <container> <path>                       Delete a file
  token <id>                                  Show token info
  new-token <parent> <token-limit> <storage-limit> [hint]
                                              Mint a child token
  reports [container] [path]                  List open reports
  report <container> <reason> <path>...       Report files in a container
  clear                                       Clear screen
  help                                        Show this help
  exit                                        Exit REPL

container, new-container, get, put, rm and report accept --password <password>.
Examples:
  use-token 4f1c2b
  new-container --password hunter2
  put c1 docs/notes.txt ./notes.txt --password hunter2
  get c1 docs/notes.txt --password hunter2
  new-token root 10 1000000 "team a"
  reports c1"""
