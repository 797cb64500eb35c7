import functools
import json
import logging

LAMBDA_TASK_ROOT = '/var/task/'


def handler_logging(func):
    "Handler decorator: json-format the root logger's output and log any error escaping the handler"
    logger = logging.getLogger()
    # the lambda runtime installs the root handler before our module is imported
    for log_handler in logger.handlers:
        log_handler.setFormatter(CloudWatchFormatter())

    @functools.wraps(func)
    def wrapper(event, context):
        try:
            return func(event, context)
        except Exception as err:
            # logged here in json form, then re-raised so the invocation still counts as an error
            logger.exception(str(err), extra={'event': event})
            raise

    return wrapper


class LogLevelContext:
    "Temporarily set the level of a logger, so one info line gets through a warning-level logger"

    def __init__(self, logger, level):
        self.logger = logger
        self.level = level

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.level)

    def __exit__(self, et, ev, tb):
        self.logger.setLevel(self.old_level)


class CloudWatchFormatter(logging.Formatter):
    "One json object per record, with AppStore request context when present"

    extras = ('event', 'status', 'url')

    def format(self, record):
        path = record.pathname
        if path.startswith(LAMBDA_TASK_ROOT):
            path = path[len(LAMBDA_TASK_ROOT):]

        # only set when running inside lambda
        request_id = getattr(record, 'aws_request_id', None)

        data = {
            'message': record.getMessage(),
            'level': record.levelname,
            'requestId': request_id,
            'sourceFile': path,
            'sourceLine': record.lineno,
        }
        data.update({extra: getattr(record, extra) for extra in self.extras if hasattr(record, extra)})

        if record.exc_info and record.exc_info[0]:
            data['exceptionType'] = record.exc_info[0].__name__
            data['exceptionInfo'] = self.formatException(record.exc_info).split('\n')
        if record.stack_info:
            data['stackInfo'] = record.stack_info.split('\n')
        return f'{record.levelname} RequestId: {request_id} Data: {json.dumps(data, default=str)}'
