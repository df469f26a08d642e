from __future__ import annotations

from metricparams import Metric, MetricSet, new_conn_param, new_param
from metricparams.validators import PatternValidator, URIValidator

DEFAULT_URI = "tcp://localhost:5432"

uri_validator = URIValidator(allowed_schemes=("tcp", "unix"), default_scheme="tcp")

param_uri = (
    new_conn_param("uri").with_default(DEFAULT_URI).with_session().with_validator(uri_validator)
)
param_user = new_conn_param("user").with_default("postgres").with_validator(
    PatternValidator(r"[A-Za-z_][A-Za-z0-9_$]{0,62}")
)
param_password = new_conn_param("password")
param_database = new_conn_param("database").with_default("postgres")

_conn = (param_uri, param_user, param_password, param_database)

METRICS = MetricSet(
    {
        "pgsql.ping": Metric("Tests whether a connection is alive or not.", _conn),
        "pgsql.db.size": Metric(
            "Returns database size in bytes.",
            (*_conn, new_param("dbname").set_required()),
        ),
        "pgsql.connections": Metric("Returns connections by type.", _conn),
        "pgsql.custom.query": Metric(
            "Returns result of a custom query.",
            (*_conn, new_param("query_name").set_required()),
            var_param=True,
        ),
    }
)
