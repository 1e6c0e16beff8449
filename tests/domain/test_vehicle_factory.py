import pytest
from pydantic import ValidationError as PydanticValidationError

from patternkit.domain.factory_method import (
    Car,
    CarFactory,
    Engine,
    Truck,
    TruckFactory,
    Vehicle,
    VehicleFactory,
    VehicleValidationError,
)


def test_car_factory_builds_car_around_engine():
    car = CarFactory().create()
    assert isinstance(car, Car)
    assert car.engine == Engine(cylinders=4, horsepower=150)
    assert car.cost() == 2300 + 6200
    assert car.description() == "4-seat car with a 4-cylinder 150hp engine"


def test_truck_factory_builds_truck_around_engine():
    truck = TruckFactory(payload_tons=20).create()
    assert isinstance(truck, Truck)
    assert truck.engine.cost() == 8 * 200 + 400 * 10
    assert truck.cost() == truck.engine.cost() + 12000 + 20 * 800


def test_engine_is_assembled_before_vehicle():
    calls = []

    class RecordingCarFactory(CarFactory):
        def build_engine(self) -> Engine:
            calls.append("engine")
            return super().build_engine()

        def assemble(self, engine: Engine) -> Vehicle:
            calls.append("vehicle")
            return super().assemble(engine)

    RecordingCarFactory().create()
    assert calls == ["engine", "vehicle"]


@pytest.mark.parametrize("factory_class, value", [
    (CarFactory, 0),
    (CarFactory, -2),
    (TruckFactory, 0),
    (TruckFactory, "heavy"),
])
def test_factories_reject_non_positive_parameters(factory_class, value):
    with pytest.raises(VehicleValidationError):
        factory_class(value)


def test_vehicles_are_immutable():
    car = CarFactory().create()
    with pytest.raises(PydanticValidationError):
        car.seats = 7


def test_factories_are_interchangeable():
    factories = [CarFactory(seats=2), TruckFactory()]
    for factory in factories:
        assert isinstance(factory, VehicleFactory)
        vehicle = factory.create()
        assert vehicle.to_dict()["cost"] == vehicle.cost()
