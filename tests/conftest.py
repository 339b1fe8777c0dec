import io

import pytest
from rich.console import Console

from hms.console.commands import CommandHandlers
from hms.records.registry import HospitalRegistry
from hms.records.store import DoctorStore, PatientStore


@pytest.fixture
def patients() -> PatientStore:
    return PatientStore()


@pytest.fixture
def doctors() -> DoctorStore:
    return DoctorStore()


@pytest.fixture
def registry(patients: PatientStore, doctors: DoctorStore) -> HospitalRegistry:
    return HospitalRegistry(patients=patients, doctors=doctors)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def handlers(registry: HospitalRegistry, console: Console) -> CommandHandlers:
    return CommandHandlers(registry, console)
