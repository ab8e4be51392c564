import asyncio
import threading

from ambit.context import ExecutionContext, active_plugin, entering
from ambit.plugin import PluginContainer


def test_no_plugin_is_active_by_default():
    assert active_plugin() is None
    assert ExecutionContext.current() == ExecutionContext()
    assert ExecutionContext.current().plugin_container is None


def test_entering_marks_the_plugin_active_for_the_block():
    container = PluginContainer("alpha")

    with entering(container) as context:
        assert active_plugin() is container
        assert context.plugin_container is container

    assert active_plugin() is None


def test_nested_blocks_restore_the_previous_plugin():
    outer = PluginContainer("outer")
    inner = PluginContainer("inner")

    with entering(outer):
        with entering(inner):
            assert active_plugin() is inner
        assert active_plugin() is outer
        with entering(None):
            assert active_plugin() is None
        assert active_plugin() is outer


def test_marker_is_restored_when_the_block_raises():
    container = PluginContainer("alpha")

    try:
        with entering(container):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert active_plugin() is None


def test_marker_is_per_thread():
    container = PluginContainer("alpha")
    seen = []

    with entering(container):
        thread = threading.Thread(target=lambda: seen.append(active_plugin()))
        thread.start()
        thread.join()

    assert seen == [None]


def test_marker_is_per_task():
    first = PluginContainer("first")
    second = PluginContainer("second")

    async def run_as(container):
        with entering(container):
            await asyncio.sleep(0)
            return active_plugin()

    async def main():
        return await asyncio.gather(run_as(first), run_as(second))

    assert asyncio.run(main()) == [first, second]
