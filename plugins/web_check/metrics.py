from __future__ import annotations

from metricparams import Metric, MetricSet, new_param
from metricparams.validators import PatternValidator, RangeValidator, SetValidator

param_host = new_param("host").set_required()
param_path = new_param("path").with_default("/").with_validator(PatternValidator(r"/\S*"))
param_port = new_param("port").with_default("80").with_validator(RangeValidator(1, 65535))

TCP_SERVICES = (
    "ssh",
    "ldap",
    "smtp",
    "ftp",
    "http",
    "pop",
    "nntp",
    "imap",
    "tcp",
    "https",
    "telnet",
)

METRICS = MetricSet(
    {
        "web.page.get": Metric(
            "Get content of a web page.",
            (param_host, param_path, param_port),
        ),
        "web.page.perf": Metric(
            "Loading time of a full web page, in seconds.",
            (param_host, param_path, param_port),
        ),
        "net.tcp.service": Metric(
            "Checks if a service is running and accepting TCP connections.",
            (
                new_param("service")
                .set_required()
                .with_validator(SetValidator(TCP_SERVICES)),
                new_param("ip"),
                new_param("port").with_validator(RangeValidator(1, 65535)),
            ),
        ),
    }
)
