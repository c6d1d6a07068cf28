import argparse
import configparser
import logging
import sys
import platform

from minmaxheap.sequences import SEQUENCE_REGISTRY


def str2bool(v):
    """For making the ``ArgumentParser`` understand boolean values"""
    return v.lower() in ("yes", "true", "t", "1")


def parse_value(val):
    """Converts a configuration string to int, float or bool if it
    looks like one. Other strings are returned unchanged.
    """
    try:
        return int(val)
    except ValueError:
        pass
    try:
        return float(val)
    except ValueError:
        pass
    if val.lower() == "true":
        return True
    if val.lower() == "false":
        return False
    return val


def load_config_file(path):
    """Reads options from a configuration file in standard .ini format.
    Section names are ignored; if an option appears in several sections
    the last one wins.

    Args:
        path (string): Path to the configuration file

    Returns:
        dict. Option names (with '-' replaced by '_') mapped to values

    Raises:
        IOError. If the file cannot be read
    """
    config = configparser.ConfigParser()
    if not config.read(path):
        raise IOError("Could not read configuration file '%s'" % path)
    values = {}
    for section in config.sections():
        for key, val in config.items(section):
            values[key.replace('-', '_')] = parse_value(val)
    return values


def run_diagnostics():
    """Check availability of external libraries."""
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    if sys.version_info > (3, 0):
        print("Checking Python3.... %sOK (%s)%s"
              % (OKGREEN, platform.python_version(), ENDC))
    else:
        print("Checking Python3.... %sNOT FOUND %s%s"
              % (FAIL, sys.version_info, ENDC))
        print("Please upgrade to Python 3!")
    try:
        import numpy
        print("Checking numpy.... %sOK (%s)%s"
              % (OKGREEN, numpy.__version__, ENDC))
    except ImportError:
        print("Checking numpy.... %sNOT FOUND%s" % (FAIL, ENDC))
        print("numpy is not available. This affects the following "
              "components: Backends: array. Input methods: dummy.")
    try:
        import sortedcontainers
        print("Checking sortedcontainers.... %sOK (%s)%s"
              % (OKGREEN, sortedcontainers.__version__, ENDC))
    except ImportError:
        print("Checking sortedcontainers.... %sNOT FOUND%s" % (FAIL, ENDC))
        print("sortedcontainers is not available. It is only needed "
              "to run the test suite.")


def get_parser():
    """Get the parser object which is used to build the configuration
    argument ``args``. This is a helper method for ``get_args()``

    Returns:
        ArgumentParser. The pre-filled parser object
    """
    parser = argparse.ArgumentParser()
    parser.register('type', 'bool', str2bool)

    ## General options
    group = parser.add_argument_group('General options')
    group.add_argument('--config_file',
                        help="Configuration file in standard .ini format. "
                        "Options in the file become defaults, so command "
                        "line arguments take precedence.")
    group.add_argument("--run_diagnostics", default=False, action="store_true",
                       help="Run diagnostics and check availability of "
                       "external libraries.")
    group.add_argument("--verbosity", default="info",
                        choices=['debug', 'info', 'warn', 'error'],
                        help="Log level: debug,info,warn,error")
    group.add_argument("--ignore_sanity_checks", default=False, type='bool',
                       help="minmaxheap terminates when a sanity check "
                       "fails by default. Set this to true to ignore "
                       "sanity checks.")
    group.add_argument("--seed", default=0, type=int,
                        help="Random seed to use for numpy operations")

    ## Input options
    group = parser.add_argument_group('Input options')
    group.add_argument("--input_method", default="file",
                        choices=['dummy', 'file', 'shell', 'stdin'],
                        help="This parameter controls how the values are "
                        "provided. minmaxheap supports four modes:\n\n"
                        "* 'dummy': Use random values, see --range.\n"
                        "* 'file': Read values from a plain text file "
                            "specified by --input_file.\n"
                        "* 'shell': Start an interactive shell.\n"
                        "* 'stdin': Values are read from stdin\n\n")
    group.add_argument("--input_file", default="",
                        help="Path to the values. This is expected to be "
                        "a plain text file with whitespace separated "
                        "values. In 'shell' mode the file is optional and "
                        "fills the initial heap.")
    group.add_argument("--range", default="",
                        help="Number of random values to generate with the "
                        "'dummy' input method.")
    group.add_argument("--value_type", default="float",
                        choices=['int', 'float', 'str'],
                        help="How to interpret input tokens. 'str' orders "
                        "values lexicographically.")

    ## Heap options
    group = parser.add_argument_group('Heap options')
    group.add_argument("--backend", default="list",
                        choices=sorted(SEQUENCE_REGISTRY.keys()),
                        help="Storage for the heap elements.\n\n"
                        "* 'list': Python list.\n"
                        "* 'array': numpy array, see --dtype and --reserve.")
    group.add_argument("--check_invariant", default=False, type='bool',
                        help="Check the min-max heap property after building "
                        "the heap and after every extraction. This is slow "
                        "(O(n) per check) and meant for debugging.")

    ## Output options
    group = parser.add_argument_group('Output options')
    group.add_argument("--mode", default="ascending",
                        choices=['ascending', 'descending', 'extremes', 'heap'],
                        help="What to output.\n\n"
                        "* 'ascending': All values, smallest first.\n"
                        "* 'descending': All values, largest first.\n"
                        "* 'extremes': The minimum and the maximum.\n"
                        "* 'heap': The values in heap order.")
    group.add_argument("--nbest", default=0, type=int,
                        help="Maximum number of values to output in the "
                        "'ascending' and 'descending' modes. Set to 0 to "
                        "output all values.")
    group.add_argument("--output_path", default="",
                        help="Path to the output file. Empty means stdout.")

    return parser


def parse_args(parser, argv=None):
    config = {}
    args, _ = parser.parse_known_args(argv)
    if args.config_file:
        config = load_config_file(args.config_file)
        parser.set_defaults(**config)
        args, _ = parser.parse_known_args(argv)
    if args.backend in SEQUENCE_REGISTRY:
        SEQUENCE_REGISTRY[args.backend].add_args(parser)
        # Backend options did not exist when the defaults were set
        parser.set_defaults(**config)
    return parser.parse_args(argv)


def get_args(argv=None):
    parser = get_parser()
    args = parse_args(parser, argv)
    return args


def validate_args(args):
    """Some rudimentary sanity checks for configuration options.
    This method directly prints help messages to the user. In case of fatal
    errors, it raises an ``AttributeError``

    Args:
        args (object):  Configuration as returned by ``get_args``
    """
    sanity_check_failed = False
    if args.backend not in SEQUENCE_REGISTRY:
        logging.warning("Unknown backend '%s'. Available backends: %s"
                        % (args.backend, ', '.join(sorted(SEQUENCE_REGISTRY))))
        sanity_check_failed = True
    if args.input_method == 'file' and not args.input_file:
        logging.warning("The 'file' input method requires --input_file.")
        sanity_check_failed = True
    if args.input_method == 'dummy' and args.value_type == 'str':
        logging.warning("The 'dummy' input method generates numbers, but "
                        "value_type is 'str'.")
        sanity_check_failed = True
    if args.backend == 'array' and args.value_type == 'str':
        logging.warning("The array backend stores numbers. Use the list "
                        "backend for value_type 'str'.")
        sanity_check_failed = True
    elif args.backend == 'array':
        try:
            dtype = SEQUENCE_REGISTRY['array'].resolve_dtype(args)
            if dtype.kind in "iu" and args.value_type == 'float':
                logging.warning("The %s array backend would truncate float "
                                "values. Use --value_type int or a float "
                                "dtype." % dtype)
                sanity_check_failed = True
        except TypeError:
            logging.warning("Unknown numpy dtype '%s'." % args.dtype)
            sanity_check_failed = True
    if args.range and args.input_method != 'dummy':
        logging.warning("The --range parameter is only used by the 'dummy' "
                        "input method.")
    if args.nbest and args.mode not in ('ascending', 'descending'):
        logging.warning("--nbest has no effect in '%s' mode." % args.mode)
    if args.nbest < 0:
        logging.warning("--nbest must not be negative.")
        sanity_check_failed = True

    if sanity_check_failed and not args.ignore_sanity_checks:
        raise AttributeError("Sanity check failed (see warnings). If you want "
            "to proceed despite these warnings, use --ignore_sanity_checks.")
