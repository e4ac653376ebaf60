"""Hypothesis strategies for property-based testing of pyoptional."""

from hypothesis import strategies as st
from pyoptional import Absent, Optional

# -----------------------------------------------------------------------------
# Held values (never None)
# -----------------------------------------------------------------------------

integers = st.integers()
texts = st.text(st.characters(exclude_categories=('Cs',)), min_size=0, max_size=100)

values = st.one_of(
    integers,
    texts,
    st.booleans(),
    st.floats(allow_nan=False),
    st.tuples(st.integers(), st.text(max_size=10)),
)

# Values that round-trip through JSON with their type intact
json_values = st.one_of(
    st.integers(min_value=-(2**63), max_value=2**64 - 1),
    texts,
    st.booleans(),
    st.lists(st.integers(min_value=-1000, max_value=1000), max_size=10),
)

# -----------------------------------------------------------------------------
# Optionals
# -----------------------------------------------------------------------------

presents = values.map(Optional.of)
absents = st.just(Absent)
optionals = st.one_of(presents, absents)
nullables = st.one_of(st.none(), values)
