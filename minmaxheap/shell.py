import copy
import logging
import os
import sys
from cmd import Cmd

from minmaxheap import heap_utils
from minmaxheap.core import HeapError
from minmaxheap.min_max_queue import MinMaxHeap
from minmaxheap.sequences import SEQUENCE_REGISTRY
from minmaxheap.ui import get_args, parse_value, run_diagnostics


class HeapPrompt(Cmd):
    """Interactive shell around a single ``MinMaxHeap``. A line without
    a command pushes all values on it.
    """

    prompt = "minmaxheap> "

    def __init__(self, heap, stdout=None):
        Cmd.__init__(self, stdout=stdout)
        self.heap = heap

    def _print(self, value):
        self.stdout.write("%s\n" % (value,))

    def onecmd(self, line):
        try:
            return Cmd.onecmd(self, line)
        except (HeapError, ValueError) as e:
            logging.error("%s: %s" % (e.__class__.__name__, e))

    def default(self, cmd_args):
        """Push all values on the line."""
        self.do_push(cmd_args)

    def emptyline(self):
        pass

    def do_push(self, cmd_args):
        """Push one or more values. Syntax: 'push <value> [<value> ...]'"""
        for value in heap_utils.parse_values([cmd_args]):
            self.heap.insert(value)

    def do_pop(self, cmd_args):
        """Remove and print the minimum."""
        self._print(self.heap.popmin())

    def do_popmax(self, cmd_args):
        """Remove and print the maximum."""
        self._print(self.heap.popmax())

    def do_peek(self, cmd_args):
        """Print the minimum and the maximum."""
        self._print("min=%s max=%s" % (self.heap.peekmin(), self.heap.peekmax()))

    def do_remove(self, cmd_args):
        """Remove and print the value at a position. Syntax: 'remove <index>'"""
        self._print(self.heap.remove(int(cmd_args)))

    def do_update(self, cmd_args):
        """Change the value at a position. Syntax: 'update <index> <value>'"""
        split_args = cmd_args.split()
        if len(split_args) != 2:
            self._print("Syntax: 'update <index> <new-value>'")
            return
        values = heap_utils.parse_values([split_args[1]])
        if values:
            self.heap.update(int(split_args[0]), values[0])

    def do_show(self, cmd_args):
        """Print the values in heap order."""
        self._print(self.heap.a.values())

    def do_size(self, cmd_args):
        """Print the number of values."""
        self._print(len(self.heap))

    def do_check(self, cmd_args):
        """Check the min-max heap property."""
        self.heap.check()
        self._print("OK")

    def do_diagnostics(self, cmd_args):
        """Run diagnostics to check which external libraries are
        available to minmaxheap."""
        run_diagnostics()

    def do_config(self, cmd_args):
        """Change configuration. Syntax: 'config <key> <value>'.
        Changing the backend moves all values to a new heap.
        """
        args = heap_utils.args
        split_args = cmd_args.split()
        if len(split_args) < 2:
            self._print("Syntax: 'config <key> <new-value>'")
            return
        key, val = (split_args[0], parse_value(' '.join(split_args[1:])))
        if key in ["backend", "dtype", "reserve"]:
            # Build the new heap first and keep the old configuration if
            # the backend cannot hold the values
            new_args = copy.copy(args)
            setattr(new_args, key, val)
            if new_args.backend not in SEQUENCE_REGISTRY:
                logging.error("Unknown backend '%s'. Available backends: %s"
                              % (new_args.backend,
                                 ', '.join(sorted(SEQUENCE_REGISTRY))))
                return
            try:
                sequence = SEQUENCE_REGISTRY[new_args.backend].from_args(new_args)
                heap = MinMaxHeap(self.heap.a.values(), sequence=sequence)
            except (TypeError, ValueError) as e:
                logging.error("Cannot switch to %s=%s: %s" % (key, val, e))
                return
            self.heap = heap
        setattr(args, key, val)
        self._print("Setting %s=%s..." % (key, val))

    def do_quit(self, cmd_args):
        """Quits minmaxheap."""
        return True

    def do_EOF(self, line):
        "Quits minmaxheap"
        self._print("quit")
        return True


def main(argv=None):
    """Entry point of the ``minmaxheap`` command. """
    args = get_args(argv)
    heap_utils.base_init(args)

    if args.input_method == 'file':
        if os.access(args.input_file, os.R_OK):
            with open(args.input_file) as f:
                heap_utils.process(heap_utils.parse_values(f))
        else:
            logging.fatal("Input file '%s' not readable. Please double-check the "
                          "input_file option or choose an alternative input_method."
                          % args.input_file)
            return 1
    elif args.input_method == 'dummy':
        heap_utils.process(heap_utils.dummy_values())
    elif args.input_method == 'stdin':
        heap_utils.process(heap_utils.parse_values(sys.stdin))
    else: # Interactive mode: shell
        values = []
        if args.input_file and os.access(args.input_file, os.R_OK):
            with open(args.input_file) as f:
                values = heap_utils.parse_values(f)
        print("Starting interactive mode...")
        print("PID: %d" % os.getpid())
        print("Display help with 'help'")
        print("Quit with ctrl-d or 'quit'")
        prompt = HeapPrompt(heap_utils.create_heap(values))
        prompt.cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
