import copy

import pytest

from config import solar
from orrery import RecordingRenderer, SceneAssembler


@pytest.fixture
def body_table():
    return copy.deepcopy(solar.BODIES)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def assembler(renderer, body_table):
    return SceneAssembler(
        renderer,
        body_table,
        ring=solar.RING,
        starfield=solar.STARFIELD,
        simulation=solar.SIMULATION,
    )


@pytest.fixture
def context(assembler):
    return assembler.assemble(seed=1234)
