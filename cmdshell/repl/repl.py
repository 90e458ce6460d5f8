"""REPL interface for interactive sessions."""
import json
import logging
import sys

from cmdshell.dispatcher import ShellDispatcher

logger = logging.getLogger(__name__)


class Repl:
    """Interactive REPL (Read-Eval-Print Loop) interface.
    
    Lines starting with '/' control the REPL itself; every other line is a
    command line handed to the dispatcher, e.g. ``shell echo $(ping)``.
    """
    
    def __init__(self, dispatcher: ShellDispatcher, output_stream=None):
        """Initialize the REPL interface.
        
        Args:
            dispatcher: The ShellDispatcher that runs command lines
            output_stream: Optional output stream (defaults to sys.stdout)
        """
        self.dispatcher = dispatcher
        self.verbose = False  # Verbose mode off by default
        self.output = output_stream or sys.stdout
        self.commands = {
            "/help": self._cmd_help,
            "/exit": self._cmd_exit,
            "/verbose": self._cmd_verbose,
        }

    def start(self) -> None:
        """Start the REPL interface.
        
        Reads lines until EOF, Ctrl-C or /exit.
        """
        print("cmdshell REPL started", file=self.output)
        print("Type commands such as 'shell echo $(ping)' (/help for help)", file=self.output)
        
        while True:
            try:
                user_input = input("> ")
                self._process_input(user_input)
            except (KeyboardInterrupt, EOFError):
                print("\nExiting...", file=self.output)
                break
    
    def _process_input(self, user_input: str) -> None:
        """Process user input.
        
        Args:
            user_input: Input from the user
        """
        user_input = user_input.strip()
        
        if not user_input:
            return
        
        if user_input.startswith("/"):
            self._handle_command(user_input)
        else:
            self._handle_line(user_input)
    
    def _handle_command(self, command: str) -> None:
        """Handle a REPL command.
        
        Args:
            command: Command from the user
        """
        parts = command.split(maxsplit=1)
        cmd = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""
        
        if cmd in self.commands:
            self.commands[cmd](args)
        else:
            print(f"Unknown command: {cmd}", file=self.output)
            print("Type /help for available commands", file=self.output)
    
    def _handle_line(self, line: str) -> None:
        """Run a command line and print its result.
        
        Args:
            line: Command line from the user
        """
        result = self.dispatcher.handle(line)
        
        if result.is_error:
            print(f"Error: {result.content}", file=self.output)
        elif result.content:
            print(result.content, file=self.output)
        elif not result.notes.get("known_command"):
            print(f"Unknown command: {result.notes.get('command')}", file=self.output)
            print("Type 'help' to list commands", file=self.output)
        
        if self.verbose:
            print("\nNotes:", file=self.output)
            print(json.dumps(result.notes, indent=2, default=str), file=self.output)

    def _cmd_help(self, args: str) -> None:
        """Handle the help command.
        
        Args:
            args: Command arguments
        """
        print("Available commands:", file=self.output)
        print("  /help - Show this help", file=self.output)
        print("  /verbose [on|off] - Toggle verbose mode", file=self.output)
        print("  /exit - Exit the REPL", file=self.output)
        print("Shell commands:", file=self.output)
        for name, help_text in self.dispatcher.registry.list_commands():
            print(f"  {name} - {help_text}", file=self.output)
    
    def _cmd_verbose(self, args: str) -> None:
        """Handle the verbose command.
        
        Args:
            args: Command arguments
        """
        if not args:
            self.verbose = not self.verbose
        elif args.lower() in ["on", "true", "yes", "1"]:
            self.verbose = True
        elif args.lower() in ["off", "false", "no", "0"]:
            self.verbose = False
        else:
            print(f"Invalid option: {args}", file=self.output)
            print("Usage: /verbose [on|off]", file=self.output)
            return
        
        print(f"Verbose mode: {'on' if self.verbose else 'off'}", file=self.output)
    
    def _cmd_exit(self, args: str) -> None:
        """Handle the exit command.
        
        Args:
            args: Command arguments
        """
        print("Exiting...", file=self.output)
        sys.exit(0)
