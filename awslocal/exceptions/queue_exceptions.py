class QueueException(Exception):
    """Base for all queue operation failures"""

    pass


class QueueCreateException(QueueException):
    pass


class QueueSendException(QueueException):
    pass


class QueueReceiveException(QueueException):
    pass


class QueueDeleteException(QueueException):
    pass
