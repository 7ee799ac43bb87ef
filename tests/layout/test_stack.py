"""Tests for the stacking of lines into spaces."""

import pytest

from linesetter import Align, Box, Dir, Gen2, LayoutSpace, LayoutWarning, Size
from linesetter.geometry import DEFAULT_DIRS, Margins
from linesetter.layout import (
    HARD, LINE, PARAGRAPH, StackContext, StackLayouter)
from linesetter.logger import capture_logs

from ..testing_utils import START, assert_no_logs, serialize, word


def make_stack(spaces=((100, 100),), dirs=DEFAULT_DIRS, repeat=True):
    spaces = [
        space if isinstance(space, LayoutSpace) else LayoutSpace(space)
        for space in spaces]
    return StackLayouter(StackContext(spaces, dirs, repeat))


@assert_no_logs
def test_stack_start():
    stack = make_stack()
    stack.add(word('a', 10, 10), START)
    stack.add(word('b', 30, 20), START)
    space, = stack.finish()
    assert serialize(space) == [((0, 0), 'a', []), ((0, 10), 'b', [])]


@assert_no_logs
def test_stack_end():
    stack = make_stack()
    stack.add(word('a', 10, 10), START)
    stack.add(word('b', 10, 20), Gen2(Align.END, Align.END))
    space, = stack.finish()
    assert serialize(space) == [((0, 0), 'a', []), ((90, 80), 'b', [])]


@assert_no_logs
def test_stack_center():
    stack = make_stack()
    stack.add(word('a', 10, 20), Gen2(Align.CENTER, Align.CENTER))
    space, = stack.finish()
    assert serialize(space) == [((45, 40), 'a', [])]


@assert_no_logs
def test_stack_center_then_end():
    stack = make_stack()
    stack.add(word('a', 10, 20), Gen2(Align.CENTER, Align.START))
    stack.add(word('b', 10, 20), Gen2(Align.END, Align.START))
    space, = stack.finish()
    # The centered box is centered in what is left by the end-aligned box.
    assert serialize(space) == [((0, 30), 'a', []), ((0, 80), 'b', [])]


@assert_no_logs
def test_stack_bottom_to_top():
    stack = make_stack(dirs=Gen2(Dir.BTT, Dir.LTR))
    stack.add(word('a', 10, 10), START)
    stack.add(word('b', 10, 20), START)
    space, = stack.finish()
    assert serialize(space) == [((0, 90), 'a', []), ((0, 70), 'b', [])]


@assert_no_logs
def test_stack_insets():
    space = LayoutSpace((100, 100), insets=Margins(5, 10, 5, 10))
    assert space.usable() == Size(90, 80)
    stack = make_stack([space])
    assert stack.usable() == Size(90, 80)
    stack.add(word('a', 10, 10), START)
    space, = stack.finish()
    assert tuple(space.size) == (100, 100)
    assert serialize(space) == [((5, 10), 'a', [])]


@assert_no_logs
def test_stack_no_expansion():
    stack = make_stack([LayoutSpace((100, 100), expansion=(False, False))])
    stack.add(word('a', 30, 10), START)
    stack.add(word('b', 20, 15), START)
    space, = stack.finish()
    assert tuple(space.size) == (30, 25)


@assert_no_logs
def test_stack_spacing():
    stack = make_stack()
    stack.add(word('a', 10, 10), START)
    stack.add_spacing(5, LINE)
    stack.add_spacing(8, PARAGRAPH)
    stack.add(word('b', 10, 10), START)
    stack.add_spacing(500, HARD)
    assert stack.usable() == Size(100, 0)
    space, = stack.finish()
    assert serialize(space) == [((0, 0), 'a', []), ((0, 18), 'b', [])]


@assert_no_logs
def test_stack_negative_spacing():
    stack = make_stack()
    stack.add(word('a', 10, 30), START)
    stack.add_spacing(-30, HARD)
    assert stack.usable() == Size(100, 100)
    stack.add(word('b', 10, 10), Gen2(Align.START, Align.END))
    space, = stack.finish()
    assert serialize(space) == [((0, 0), 'a', []), ((90, 0), 'b', [])]


@assert_no_logs
def test_stack_remaining():
    stack = make_stack([(100, 100), (60, 60)])
    stack.add(word('a', 10, 40), START)
    remaining = stack.remaining()
    assert [tuple(space.size) for space in remaining] == [(100, 60), (60, 60)]
    assert all(space.insets == Margins.ZERO for space in remaining)
    assert not any(any(space.expansion) for space in remaining)


@assert_no_logs
def test_stack_fitting_alignment():
    stack = make_stack()
    assert stack.is_fitting_alignment(START)
    stack.add(word('a', 10, 10), Gen2(Align.END, Align.START))
    assert not stack.is_fitting_alignment(START)
    assert not stack.is_fitting_alignment(Gen2(Align.CENTER, Align.START))
    assert stack.is_fitting_alignment(Gen2(Align.END, Align.END))
    stack.add(word('b', 10, 10), START)
    first, second = stack.finish()
    assert serialize(first) == [((0, 90), 'a', [])]
    assert serialize(second) == [((0, 0), 'b', [])]


@assert_no_logs
def test_stack_set_spaces():
    stack = make_stack([(100, 100), (60, 60)])
    stack.set_spaces([LayoutSpace((50, 50))], True)
    assert stack.usable() == Size(50, 50)
    stack.add(word('a', 10, 10), START)
    stack.set_spaces([LayoutSpace((20, 20))], True)
    assert stack.usable() == Size(50, 40)
    stack.finish_space(True)
    assert stack.usable() == Size(20, 20)
    assert stack.space_is_last()
    first, second = stack.finish()
    assert tuple(first.size) == (50, 50)
    assert tuple(second.size) == (20, 20)


@assert_no_logs
def test_stack_skip_to_fitting_space():
    stack = make_stack([(100, 100), (50, 50), (200, 200)])
    stack.add(word('a', 10, 10), START)
    assert not stack.skip_to_fitting_space(Size(300, 10))
    assert stack.usable() == Size(100, 90)
    assert stack.skip_to_fitting_space(Size(150, 10))
    assert stack.usable() == Size(200, 200)
    first, second = stack.finish()
    assert serialize(first) == [((0, 0), 'a', [])]
    assert serialize(second) == []


@assert_no_logs
def test_stack_repeat_last_space():
    stack = make_stack([(100, 15)])
    for label in 'abc':
        stack.add(word(label, 10, 10), START)
    spaces = stack.finish()
    assert [serialize(space) for space in spaces] == [
        [((0, 0), 'a', [])], [((0, 0), 'b', [])], [((0, 0), 'c', [])]]


@pytest.mark.parametrize('repeat', (True, False))
def test_stack_overflow(repeat):
    stack = make_stack([(100, 20)], repeat=repeat)
    with capture_logs() as logs:
        stack.add(Box((50, 30)), START)
    message = 'Box of size 50×30 overflows the available space 100×20'
    assert logs == [f'WARNING: {message}']
    assert stack.warnings == [LayoutWarning('overflow', message)]
    space, = stack.finish()
    assert serialize(space) == [((0, 0), (50, 30), [])]


@assert_no_logs
def test_stack_no_repeat_following_space():
    stack = make_stack([(100, 20), (100, 100)], repeat=False)
    stack.add(word('a', 100, 10), START)
    stack.add_spacing(5, HARD)
    stack.add(word('b', 100, 10), START)
    assert stack.space_is_last()
    assert [tuple(space.size) for space in stack.remaining()] == [(100, 90)]
    assert not stack.skip_to_fitting_space(Size(10, 10))
    first, second = stack.finish()
    assert serialize(first) == [((0, 0), 'a', [])]
    assert serialize(second) == [((0, 0), 'b', [])]
    assert stack.warnings == []


def test_stack_no_repeat_finish_last_space():
    stack = make_stack(repeat=False)
    stack.add(word('a', 10, 10), START)
    with capture_logs() as logs:
        stack.finish_space(True)
    message = 'No space left after space 0 and spaces are not repeated'
    assert logs == [f'WARNING: {message}']
    assert stack.warnings == [LayoutWarning('overflow', message)]
    first, second = stack.finish()
    assert serialize(first) == [((0, 0), 'a', [])]
    assert tuple(second.size) == (100, 100)
    assert serialize(second) == []


def test_stack_no_repeat_alignment():
    stack = make_stack(repeat=False)
    stack.add(word('a', 10, 10), Gen2(Align.END, Align.START))
    with capture_logs() as logs:
        stack.add(word('b', 10, 10), START)
    message = (
        'Main alignment START does not fit in the last space '
        'and spaces are not repeated')
    assert logs == [f'WARNING: {message}']
    space, = stack.finish()
    assert serialize(space) == [((0, 80), 'a', []), ((0, 10), 'b', [])]


@assert_no_logs
def test_stack_finish_empty_soft_space():
    stack = make_stack()
    stack.add(word('a', 10, 10), START)
    stack.finish_space(False)
    assert stack.space_is_empty()
    space, = stack.finish()
    assert len(space.children) == 1
