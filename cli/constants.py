"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = [
    "register", "add", "verify", "exists", "count", "show", "browse",
    "events", "pause", "unpause", "status", "identity", "clear", "exit", "help",
]

STYLE = Style.from_dict(
    {
        "prompt": "#C9A227 bold",
        "command": "#0088ff bold",
    }
)

GOLD = "\033[38;2;201;162;39m"
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

LOGO = f"""{GOLD}
 ███████╗ ██████╗██████╗ ██╗██████╗ ███████╗
 ██╔════╝██╔════╝██╔══██╗██║██╔══██╗██╔════╝
 ███████╗██║     ██████╔╝██║██████╔╝█████╗
 ╚════██║██║     ██╔══██╗██║██╔══██╗██╔══╝
 ███████║╚██████╗██║  ██║██║██████╔╝███████╗
 ╚══════╝ ╚═════╝╚═╝  ╚═╝╚═╝╚═════╝ ╚══════╝
{RESET}"""

WELCOME_TITLE = "Scribe CLI - Proof of File Existence"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "scribe> "

HELP_TEXT = """Available commands:
  register <identifier> <name> <size>  Register a content identifier with name and size
  add <identifier> <file_path>         Register using a local file's name and size
  verify <identifier>                  Show the record for an identifier
  exists <identifier>                  Check whether an identifier is registered
  count                                Show the number of registered files
  show <index>                         Show the record at a registration index
  browse [offset] [limit]              List records in registration order (limit <= 200)
  events [after_id]                    List FileRegistered events
  pause                                Close registrations (operator only)
  unpause                              Reopen registrations (operator only)
  status                               Show whether registrations are paused
  identity [address]                   Show or set your caller address
  clear                                Clear screen and redisplay welcome message
  help                                 Show this help
  exit                                 Exit REPL

Identifiers come from your pinning service (e.g. an IPFS CID).
Examples:
  identity 0x4f2a...(64 hex digits)
  register bafy123 report.pdf 2048
  add bafy456 ./notes.txt
  verify bafy123
  browse 0 10"""

DEFAULT_BROWSE_LIMIT = 20
