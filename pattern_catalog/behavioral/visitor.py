"""Visitor - pricing, describing and auditing computer parts without touching them."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


class ComputerPart(ABC):
    model: str
    price: float

    @abstractmethod
    def accept(self, visitor: "ComputerPartVisitor") -> None:
        """Dispatch to the visitor method for this part type."""


@dataclass
class CPU(ComputerPart):
    model: str
    price: float
    cores: int
    speed_ghz: float

    def accept(self, visitor: "ComputerPartVisitor") -> None:
        visitor.visit_cpu(self)


@dataclass
class RAM(ComputerPart):
    model: str
    price: float
    capacity_gb: int
    memory_type: str

    def accept(self, visitor: "ComputerPartVisitor") -> None:
        visitor.visit_ram(self)


@dataclass
class Storage(ComputerPart):
    model: str
    price: float
    capacity_gb: int
    drive_type: str

    def accept(self, visitor: "ComputerPartVisitor") -> None:
        visitor.visit_storage(self)


@dataclass
class GPU(ComputerPart):
    model: str
    price: float
    memory_gb: int
    brand: str

    def accept(self, visitor: "ComputerPartVisitor") -> None:
        visitor.visit_gpu(self)


class ComputerPartVisitor(ABC):
    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    @abstractmethod
    def visit_cpu(self, cpu: CPU) -> None: ...

    @abstractmethod
    def visit_ram(self, ram: RAM) -> None: ...

    @abstractmethod
    def visit_storage(self, storage: Storage) -> None: ...

    @abstractmethod
    def visit_gpu(self, gpu: GPU) -> None: ...


class Computer:
    """Object structure: an ordered list of parts."""

    def __init__(self, narrator: Narrator, name: str):
        self.narrator = narrator
        self.name = name
        self.parts: List[ComputerPart] = []

    def add_part(self, part: ComputerPart) -> "Computer":
        self.parts.append(part)
        return self

    def accept(self, visitor: ComputerPartVisitor) -> None:
        self.narrator.say(f"Analyzing computer: {self.name}")
        for part in self.parts:
            part.accept(visitor)


class PriceCalculatorVisitor(ComputerPartVisitor):
    def __init__(self, narrator: Narrator):
        super().__init__(narrator)
        self.total_price = 0.0

    def _add(self, label: str, part: ComputerPart) -> None:
        self.narrator.say(f"  Calculating {label} price: ${part.price:.2f}")
        self.total_price += part.price

    def visit_cpu(self, cpu: CPU) -> None:
        self._add("CPU", cpu)

    def visit_ram(self, ram: RAM) -> None:
        self._add("RAM", ram)

    def visit_storage(self, storage: Storage) -> None:
        self._add("storage", storage)

    def visit_gpu(self, gpu: GPU) -> None:
        self._add("GPU", gpu)

    def display_total(self) -> None:
        self.narrator.say(f"  Total System Price: ${self.total_price:.2f}")


class SpecsDisplayVisitor(ComputerPartVisitor):
    def _show(self, heading: str, part: ComputerPart, *details: str) -> None:
        self.narrator.say(f"  {heading} Specifications:")
        with self.narrator.indented():
            self.narrator.say(f"  Model: {part.model}")
            for detail in details:
                self.narrator.say(f"  {detail}")
            self.narrator.say(f"  Price: ${part.price:.2f}")

    def visit_cpu(self, cpu: CPU) -> None:
        self._show("CPU", cpu, f"Cores: {cpu.cores}", f"Speed: {cpu.speed_ghz} GHz")

    def visit_ram(self, ram: RAM) -> None:
        self._show("RAM", ram, f"Capacity: {ram.capacity_gb} GB", f"Type: {ram.memory_type}")

    def visit_storage(self, storage: Storage) -> None:
        self._show("Storage", storage, f"Capacity: {storage.capacity_gb} GB",
                   f"Type: {storage.drive_type}")

    def visit_gpu(self, gpu: GPU) -> None:
        self._show("GPU", gpu, f"Memory: {gpu.memory_gb} GB", f"Brand: {gpu.brand}")


class UpgradeCheckVisitor(ComputerPartVisitor):
    """Flags parts below current standards and counts them."""

    def __init__(self, narrator: Narrator):
        super().__init__(narrator)
        self.upgrade_count = 0

    def _check(self, label: str, part: ComputerPart, needs_upgrade: bool, reason: str) -> None:
        if needs_upgrade:
            self.upgrade_count += 1
            self.narrator.say(f"  Checking {label}: {part.model} ... UPGRADE RECOMMENDED")
            self.narrator.say(f"      Reason: {reason}")
        else:
            self.narrator.say(f"  Checking {label}: {part.model} ... OK")

    def visit_cpu(self, cpu: CPU) -> None:
        self._check("CPU", cpu, cpu.cores < 4 or cpu.speed_ghz < 2.5,
                    "Cores < 4 or Speed < 2.5 GHz")

    def visit_ram(self, ram: RAM) -> None:
        self._check("RAM", ram, ram.capacity_gb < 8 or ram.memory_type == "DDR3",
                    "Capacity < 8GB or outdated DDR3")

    def visit_storage(self, storage: Storage) -> None:
        self._check("Storage", storage,
                    storage.drive_type == "HDD" or storage.capacity_gb < 256,
                    "Using HDD instead of SSD or Capacity < 256GB")

    def visit_gpu(self, gpu: GPU) -> None:
        self._check("GPU", gpu, gpu.memory_gb < 4, "Memory < 4GB")

    def display_summary(self) -> None:
        if self.upgrade_count == 0:
            self.narrator.say("  Upgrade Summary: All components meet current standards!")
        else:
            self.narrator.say(
                f"  Upgrade Summary: {self.upgrade_count} component(s) need upgrading"
            )


def create_gaming_pc(narrator: Narrator) -> Computer:
    return (
        Computer(narrator, "High-End Gaming PC")
        .add_part(CPU("Intel Core i9-13900K", 589.99, 24, 5.8))
        .add_part(RAM("Corsair Vengeance DDR5", 159.99, 32, "DDR5"))
        .add_part(Storage("Samsung 980 Pro", 149.99, 1000, "SSD"))
        .add_part(GPU("NVIDIA RTX 4080", 1199.99, 16, "NVIDIA"))
    )


def create_office_pc(narrator: Narrator) -> Computer:
    return (
        Computer(narrator, "Budget Office PC")
        .add_part(CPU("Intel Core i3-10100", 129.99, 4, 3.6))
        .add_part(RAM("Kingston Value DDR3", 49.99, 8, "DDR3"))
        .add_part(Storage("Seagate Barracuda", 54.99, 1000, "HDD"))
        .add_part(GPU("Intel UHD Graphics", 0.0, 2, "Intel"))
    )


def run_demo(context: "DemoContext") -> None:
    """Run three visitors over a gaming PC and an office PC."""
    narrator = context.narrator
    narrator.banner("Visitor Pattern - Computer Shop Demo")
    gaming_pc = create_gaming_pc(narrator)
    office_pc = create_office_pc(narrator)

    narrator.section("Visitor 1: Price Calculator")
    for computer in (gaming_pc, office_pc):
        calculator = PriceCalculatorVisitor(narrator)
        computer.accept(calculator)
        calculator.display_total()

    narrator.section("Visitor 2: Specifications Display")
    gaming_pc.accept(SpecsDisplayVisitor(narrator))

    narrator.section("Visitor 3: Upgrade Check")
    for computer in (gaming_pc, office_pc):
        checker = UpgradeCheckVisitor(narrator)
        computer.accept(checker)
        checker.display_summary()

    narrator.section("Demonstrating the Visitor Pattern")
    narrator.bullets([
        "Separated operations from object structure",
        "Added new operations without modifying elements",
        "Elements accept any visitor",
    ])
    narrator.blank()
    narrator.banner("Visitor Demo Complete")
