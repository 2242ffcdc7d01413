import logging
import datetime
import os
import sys

LOGGER = logging.getLogger(__name__)


# region -- Custom getLogger commands --

def getLogger(*args, **kwargs):
    """
    Custom method allowing us to add default handlers to a logger

    :param name: Mandatory, logger needs to have a name!
    :param log_level: defaults to logging.ERROR
    :return: Tuple

            * Boolean True if a console handler was added, False if the
              logger already had handlers
            * Logger entity
    """
    logger_name = kwargs.get('name', 'iopi')
    log_level = kwargs.get('log_level', logging.ERROR)

    logger = logging.getLogger(logger_name)

    if logger.handlers:
        return False, logger

    console_handler = IoPiConsoleHandler(name=logger_name)
    logger.addHandler(console_handler)
    logger.setLevel(log_level)
    return True, logger

# endregion


# region -- IoPiConsoleHandler --

class IoPiConsoleHandler(logging.StreamHandler):
    """
    Stream Log Handler for iopi records.

    Keeps the most recent records in a FIFO so they can be fetched or
    printed again later.
    """

    def __init__(self, name, stream=None, max_len=1000):
        """

        :param name: Name of the handler
        :param stream: defaults to sys.stderr
        :param max_len: How many log records to store in the FIFO
        """
        super(IoPiConsoleHandler, self).__init__(stream)
        self.name = name
        self._max_len = max_len
        self._records = []

    def emit(self, record):
        if len(self._records) >= self._max_len:
            self._records.pop(0)
        self._records.append(record)
        super(IoPiConsoleHandler, self).emit(record)

    def format(self, record):
        """
        :param record: Log record, of type logging.LogRecord
        :return: Formatted record
        """
        formatted_datetime = datetime.datetime.fromtimestamp(
            record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-4]
        formatted_string = '{} {} {} {}:{} - {}'.format(
            formatted_datetime, record.levelname, record.name,
            record.filename, str(record.lineno), record.getMessage())
        if record.exc_info:
            formatted_string += '\n' + logging.Formatter().formatException(
                record.exc_info)
        return formatted_string

    def clear_log(self):
        """
        Clear the list of stored log messages
        """
        self._records = []

    def set_max_len(self, max_len):
        self._max_len = max_len
        while len(self._records) > self._max_len:
            self._records.pop(0)

    def get_log_strings(self, num_to_print=None):
        """
        Get the oldest log messages in the FIFO.

        :param num_to_print: how many, all of them if None
        """
        records = self._records if num_to_print is None \
            else self._records[:num_to_print]
        return ['%s: %s' % (record.name, record.getMessage())
                for record in records]

    def print_messages(self, num_to_print=None):
        """
        Print log messages stored in the FIFO to stdout.

        :param num_to_print: how many, all of them if None
        """
        for line in self.get_log_strings(num_to_print):
            sys.stdout.write(line + '\n')
        sys.stdout.flush()

# endregion


# region -- Logger-related methods ---

def configure_console_logging(logger_entity, console_handler_name=None):
    """
    Method to configure logging to console using the iopi handler

    :param logger_entity: Logging entity to add the console handler to
    :param console_handler_name: will use logger_entity.name by default
    :return: True if a handler was added, False if one with that name
        already exists
    """
    if console_handler_name is None:
        if not logger_entity.name:
            errmsg = 'Cannot have a logger without a name!'
            LOGGER.error(errmsg)
            return False
        console_handler_name = '{}_console'.format(logger_entity.name)

    for handler in logger_entity.handlers:
        if isinstance(handler, logging.FileHandler):
            continue
        if handler.name and \
                handler.name.upper() == console_handler_name.upper():
            return False

    console_handler = IoPiConsoleHandler(name=console_handler_name)
    logger_entity.addHandler(console_handler)

    LOGGER.debug('Successfully created ConsoleHandler {}'.format(
        console_handler_name))
    return True


def configure_file_logging(logging_entity, filename=None, file_dir=None):
    """
    Method to configure logging to file

    :param logging_entity: Logging entity to add the FileHandler to
    :param filename:
                    * must be in the format of filename.log
                    * Will default to iopi_{logger name}.log
    :param file_dir: must be a valid path, defaults to /tmp
    :return: the log file name
    """
    if filename is None:
        filename = 'iopi_{}.log'.format(logging_entity.name)
    if file_dir:
        abs_path = os.path.abspath(file_dir)
        if not os.path.isdir(abs_path):
            errmsg = '{} is not a valid directory'.format(file_dir)
            LOGGER.error(errmsg)
            raise ValueError(errmsg)
    else:
        abs_path = '/tmp'
    log_filename = os.path.join(abs_path, filename)

    file_handler = logging.FileHandler(log_filename, mode='a')
    formatted_string = '%(asctime)s | %(levelname)s | %(name)s - ' \
                       '%(filename)s:%(lineno)s - %(message)s'
    file_handler.setFormatter(logging.Formatter(formatted_string))
    logging_entity.addHandler(file_handler)

    LOGGER.info('Successfully enabled logging to file at {}'.format(
        log_filename))
    return log_filename


def log_level_from_name(level_name):
    """
    Turn a level name given on a command line into a logging level.

    :param level_name: e.g. 'DEBUG', 'info'
    """
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise RuntimeError('No such log level: %s' % level_name)
    return level

# endregion

# end
