import logging
import sys
import time
import traceback

import numpy as np

from minmaxheap import ui
from minmaxheap.min_max_queue import MinMaxHeap
from minmaxheap.sequences import SEQUENCE_REGISTRY


args = None
"""This variable is set to the global configuration when
base_init().
"""

VALUE_TYPES = {'int': int, 'float': float, 'str': str}


def base_init(new_args):
    """This function should be called before accessing any other
    function in this module. It initializes the `args` variable on
    which all the create_* factory functions rely on as configuration
    object, and it sets up logging verbosity.

    Args:
        new_args: Configuration object from the argument parser.
    """
    global args
    args = new_args
    # Set up logger
    logging.basicConfig(format='%(asctime)s %(levelname)s: %(message)s')
    logging.getLogger().setLevel(logging.INFO)
    if args.verbosity == 'debug':
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.verbosity == 'info':
        logging.getLogger().setLevel(logging.INFO)
    elif args.verbosity == 'warn':
        logging.getLogger().setLevel(logging.WARN)
    elif args.verbosity == 'error':
        logging.getLogger().setLevel(logging.ERROR)

    ui.validate_args(args)
    if args.run_diagnostics:
        ui.run_diagnostics()
        sys.exit()


def create_sequence():
    """Creates an empty ``HeapSequence`` of the configured backend.
    This method relies on the global ``args`` variable.

    Returns:
        HeapSequence. Storage for the heap elements
    """
    try:
        return SEQUENCE_REGISTRY[args.backend].from_args(args)
    except Exception as e:
        logging.fatal("An %s has occurred while initializing the %s backend: "
                      "%s Stack trace: %s" % (sys.exc_info()[0],
                                              args.backend,
                                              e,
                                              traceback.format_exc()))
        sys.exit("Could not initialize heap backend.")


def parse_values(lines):
    """Converts whitespace separated tokens to values of the configured
    ``--value_type``. Tokens which cannot be converted are logged and
    skipped, and so are NaN floats, which are unordered.

    Args:
        lines (iterable): Lines of text

    Returns:
        list. Parsed values in input order
    """
    convert = VALUE_TYPES[args.value_type]
    values = []
    for line_idx, line in enumerate(lines):
        for token in line.split():
            try:
                value = convert(token)
            except ValueError as e:
                logging.error("Number format error in line %d: %s"
                              % (line_idx + 1, e))
                continue
            if isinstance(value, float) and np.isnan(value):
                logging.error("Unordered value in line %d: %s"
                              % (line_idx + 1, token))
                continue
            values.append(value)
    return values


def dummy_values():
    """Random values for the 'dummy' input method. The number of values
    is given by ``--range``.
    """
    try:
        n = int(args.range)
    except ValueError:
        n = 10
        logging.warning("Range argument not valid; defaulting to 10 values")
    rg = np.random.default_rng(seed=args.seed)
    if args.value_type == 'int':
        return rg.integers(0, 10 * n, size=n).tolist()
    return rg.uniform(0.0, 1.0, size=n).tolist()


def create_heap(values):
    """Builds a heap over ``values`` in O(n).

    Raises:
        HeapError. If ``--check_invariant`` is set and the heap is invalid
    """
    start_time = time.time()
    heap = MinMaxHeap(values, sequence=create_sequence())
    logging.info("Built heap with %d values (backend: %s). Time: %.4f"
                 % (len(heap), args.backend, time.time() - start_time))
    if args.check_invariant:
        heap.check()
    return heap


def do_heap(heap):
    """Extracts values from ``heap`` according to ``--mode`` and
    ``--nbest``. The ordered modes consume the heap.

    Args:
        heap (MinMaxHeap): Heap built by ``create_heap()``

    Returns:
        list. Values to output
    """
    start_time = time.time()
    if args.mode == 'heap':
        output = heap.a.values()
    elif args.mode == 'extremes':
        if len(heap) == 0:
            logging.warning("No values to report extremes for.")
            output = []
        else:
            output = [heap.peekmin(), heap.peekmax()]
    else:
        extract = heap.popmin if args.mode == 'ascending' else heap.popmax
        limit = args.nbest if args.nbest > 0 else len(heap)
        output = []
        while len(heap) > 0 and len(output) < limit:
            output.append(extract())
            if args.check_invariant:
                heap.check()
    logging.info("Processed heap in '%s' mode: %d values. Time: %.4f"
                 % (args.mode, len(output), time.time() - start_time))
    return output


def write_output(values):
    """Writes ``values`` one per line to ``--output_path`` or stdout. """
    try:
        if args.output_path:
            with open(args.output_path, "w", encoding="utf-8") as f:
                _write_values(f, values)
        else:
            _write_values(sys.stdout, values)
    except IOError as e:
        logging.error("I/O error occurred when creating output files: %s" % e)


def _write_values(f, values):
    for value in values:
        f.write(str(value))
        f.write("\n")
    f.flush()


def process(values):
    """Main entry point for the non-interactive input methods: builds
    the heap, extracts the output and writes it.

    Returns:
        list. The values written
    """
    logging.info("Read %d values" % len(values))
    heap = create_heap(values)
    output = do_heap(heap)
    write_output(output)
    return output
