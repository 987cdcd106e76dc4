import logging

from evecodec.shared.config import settings

FORMAT = "%(asctime)s %(levelname)s flow=%(flow_id)s %(name)s - %(message)s"


class FlowIdFilter(logging.Filter):
    """
    Ensures flow_id always exists on LogRecord.
    A filter rather than a record factory: the factory runs before `extra`
    is applied, and LogRecord refuses to overwrite an existing attribute.
    """

    def filter(self, record):
        if not hasattr(record, "flow_id"):
            record.flow_id = "-"
        return True


class FlowAdapter(logging.LoggerAdapter):
    """Stamps every record with the flow id of the event being handled."""

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("flow_id", self.extra.get("flow_id", "-"))
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=FORMAT
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, FlowIdFilter) for f in handler.filters):
            handler.addFilter(FlowIdFilter())
