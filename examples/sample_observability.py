import logging

from insertunit.abstract_syntax_tree.models import RuleInsertClauseNode
from insertunit.compiler.insert_compiler import InsertCompiler
from insertunit.errors import CompilationError
from insertunit.observability import (
    InMemoryMetricsAdapter,
    ObservabilitySettings,
    compose_event_observers,
    make_json_event_logger,
)

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("insertunit.sample")

metrics = InMemoryMetricsAdapter()
compiler = InsertCompiler(
    observability_settings=ObservabilitySettings(
        event_observer=compose_event_observers(make_json_event_logger(logger=logger), metrics),
        metadata={"service": "insertunit-sample"},
    ),
)

compiler.compile([RuleInsertClauseNode(table="users", values=[{"id": 1, "name": "Alice"}, {"id": 2}])])
try:
    compiler.compile([RuleInsertClauseNode(table="users", values=[])])
except CompilationError as exc:
    print(f"rejected: {exc}")

for point in metrics.counters():
    print(point)
