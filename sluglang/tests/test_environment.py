"""
Tests for Slug scope chains.
"""
import pytest

from sluglang.environment import Environment
from sluglang.exceptions import ConstantAssignmentException


def test_declare_creates_binding_in_innermost_scope():
    root = Environment()
    inner = root.child()
    inner.declare('x', 1)
    assert 'x' in inner.values
    assert 'x' not in root.values
    assert root.lookup('x') is None
    assert inner.lookup('x').value == 1


def test_lookup_walks_parent_chain():
    root = Environment()
    root.declare('g', 5)
    leaf = root.child().child()
    assert leaf.lookup('g').value == 5
    assert leaf.depth() == 2
    assert root.depth() == 0


def test_declare_overwrites_existing_binding_anywhere_in_chain():
    root = Environment()
    root.declare('x', 1)
    inner = root.child()
    inner.declare('x', 2)
    assert 'x' not in inner.values
    assert root.lookup('x').value == 2


def test_declare_can_change_constant_flag_of_mutable_binding():
    env = Environment()
    env.declare('x', 1)
    env.declare('x', 2, constant=True)
    binding = env.lookup('x')
    assert binding.value == 2
    assert binding.constant


def test_redeclaring_constant_raises():
    root = Environment()
    root.declare('x', 1, constant=True)
    with pytest.raises(ConstantAssignmentException) as exc:
        root.child().declare('x', 1, line=4, file='t.slg')
    assert exc.value.varname == 'x'
    assert str(exc.value) == "cannot assign to constant x on line 4 in t.slg"
    assert root.lookup('x').value == 1


def test_assign_updates_nearest_binding():
    root = Environment()
    root.declare('x', 1)
    inner = root.child()
    assert inner.assign('x', 9) is True
    assert root.lookup('x').value == 9


def test_assign_to_unbound_name_reports_failure():
    env = Environment().child()
    assert env.assign('missing', 1) is False
    assert env.lookup('missing') is None


def test_assign_to_constant_raises():
    env = Environment()
    env.declare('c', 3, constant=True)
    with pytest.raises(ConstantAssignmentException):
        env.child().assign('c', 4)
    assert env.lookup('c').value == 3


def test_null_binding_is_distinct_from_unbound():
    env = Environment()
    env.declare('n', None)
    assert env.lookup('n') is not None
    assert env.lookup('n').value is None


def test_bind_shadows_in_own_scope_only():
    root = Environment()
    root.declare('x', 1)
    call_scope = root.child()
    call_scope.bind('x', 2)
    assert call_scope.lookup('x').value == 2
    assert root.lookup('x').value == 1


def test_children_share_parent_scope():
    root = Environment()
    root.declare('count', 0)
    first, second = root.child(), root.child()
    first.assign('count', 1)
    assert second.lookup('count').value == 1
