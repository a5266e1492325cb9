"""Domain types used to exercise the graph builder.

The namespace layout mirrors a model split across several packages, so
tests can move the internal-domain boundary around:

- tests.fixtures.namespace_a: SomeA, SomeB
- tests.fixtures.namespace_b: SomeClass
- tests.fixtures.namespace_b.other: SomeOtherClass
- tests.fixtures.namespace_b.other.another: SomeAnotherClass
- tests.fixtures.graph_nodes: GraphNode for generated graphs
- tests.fixtures.plain_model: non-dataclass types for SchemaRegistry tests
"""
