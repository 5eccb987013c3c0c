"""Tests for Partner Catalog."""

from datetime import datetime, time

from src.modules.logistics_matching.partner_catalog import PartnerCatalog
from src.modules.logistics_matching.schemas import (
    Coverage,
    DeliveryPartner,
    ServiceOffering,
    VehicleClass,
    WorkingHours,
)
from src.modules.logistics_matching.constants import (
    CompanyType,
    DEFAULT_WORKING_DAYS,
    DEFAULT_WORKING_END,
    DEFAULT_WORKING_START,
    ServiceType,
    Specialization,
    VehicleType,
    Weekday,
)


class TestPartnerCoverage:
    """Test suite for coverage predicates."""

    def setup_method(self):
        """Set up test fixtures."""
        self.catalog = PartnerCatalog()

    def create_partner(self, cities=None, states=None, active: bool = True):
        """Helper to create a test partner."""
        return DeliveryPartner(
            id="P1",
            name="Kaveri Logistics",
            company_type=CompanyType.LOGISTICS,
            coverage=Coverage(cities=cities or [], states=states or []),
            active=active,
            verified=True,
        )

    def test_covers_city_or_state(self):
        """Strict coverage accepts a declared city or a declared state."""
        partner = self.create_partner(cities=["Tiruchirappalli"], states=["Kerala"])

        assert self.catalog.covers_location(partner, "Tiruchirappalli", "Tamil Nadu") is True
        assert self.catalog.covers_location(partner, "Kochi", "Kerala") is True
        assert self.catalog.covers_location(partner, "Madurai", "Tamil Nadu") is False

    def test_can_serve_active_partner_anywhere(self):
        """An active partner passes can_serve regardless of coverage."""
        partner = self.create_partner(cities=["Chennai"])

        assert self.catalog.can_serve(partner, "Pune", "Maharashtra") is True
        assert self.catalog.is_active_regardless_of_coverage(partner) is True

    def test_can_serve_inactive_partner(self):
        """An inactive partner passes only through declared coverage."""
        partner = self.create_partner(cities=["Chennai"], states=["Tamil Nadu"], active=False)

        assert self.catalog.can_serve(partner, "Chennai", "Tamil Nadu") is True
        assert self.catalog.can_serve(partner, "Salem", "Tamil Nadu") is True
        assert self.catalog.can_serve(partner, "Pune", "Maharashtra") is False
        assert self.catalog.is_active_regardless_of_coverage(partner) is False


class TestEligibleVehicles:
    """Test suite for vehicle eligibility."""

    def setup_method(self):
        """Set up test fixtures."""
        self.catalog = PartnerCatalog()

    def create_partner(self, vehicles):
        """Helper to create a test partner with a fleet."""
        return DeliveryPartner(
            id="P1",
            name="Fleet Partner",
            company_type=CompanyType.TRANSPORT,
            vehicles=vehicles,
        )

    def test_refrigeration_required_without_refrigerated_vehicle(self):
        """No refrigerated vehicle means no eligible vehicle."""
        partner = self.create_partner([
            VehicleClass(type=VehicleType.BIKE, capacity_weight=20),
            VehicleClass(type=VehicleType.TRUCK, capacity_weight=5000),
        ])

        assert self.catalog.eligible_vehicles(partner, requires_refrigeration=True) == []

    def test_refrigeration_required(self):
        """Only refrigerated vehicles qualify for cold chain shipments."""
        reefer = VehicleClass(
            type=VehicleType.REFRIGERATED_TRUCK,
            capacity_weight=3000,
            is_refrigerated=True,
        )
        partner = self.create_partner([
            VehicleClass(type=VehicleType.VAN, capacity_weight=800),
            reefer,
        ])

        assert self.catalog.eligible_vehicles(partner, weight=500, requires_refrigeration=True) == [reefer]

    def test_weight_and_volume_limits(self):
        """Vehicles too small in weight or volume are dropped."""
        bike = VehicleClass(type=VehicleType.BIKE, capacity_weight=20, capacity_volume=0.1)
        van = VehicleClass(type=VehicleType.VAN, capacity_weight=800, capacity_volume=6)
        truck = VehicleClass(type=VehicleType.TRUCK, capacity_weight=5000, capacity_volume=30)
        partner = self.create_partner([bike, van, truck])

        assert self.catalog.eligible_vehicles(partner, weight=15, volume=0.05) == [bike, van, truck]
        assert self.catalog.eligible_vehicles(partner, weight=500) == [van, truck]
        assert self.catalog.eligible_vehicles(partner, weight=500, volume=10) == [truck]
        assert self.catalog.eligible_vehicles(partner, weight=10000) == []

    def test_weight_at_capacity(self):
        """A shipment equal to the capacity fits."""
        van = VehicleClass(type=VehicleType.VAN, capacity_weight=800)
        partner = self.create_partner([van])

        assert self.catalog.eligible_vehicles(partner, weight=800) == [van]

    def test_unknown_capacity_does_not_restrict(self):
        """Vehicles without a declared capacity accept any load."""
        car = VehicleClass(type=VehicleType.CAR)
        partner = self.create_partner([car])

        assert self.catalog.eligible_vehicles(partner, weight=10000, volume=500) == [car]

    def test_missing_shipment_dimensions(self):
        """Without weight or volume every vehicle qualifies."""
        vehicles = [
            VehicleClass(type=VehicleType.BIKE, capacity_weight=20),
            VehicleClass(type=VehicleType.VAN, capacity_weight=800),
        ]
        partner = self.create_partner(vehicles)

        assert self.catalog.eligible_vehicles(partner) == vehicles
        assert self.catalog.eligible_vehicles(partner, weight=0, volume=None) == vehicles

    def test_empty_fleet(self):
        """A partner without vehicles yields an empty list."""
        assert self.catalog.eligible_vehicles(self.create_partner([]), weight=1) == []


class TestOfferingsAndSchedule:
    """Test suite for offerings, working hours and specializations."""

    def setup_method(self):
        """Set up test fixtures."""
        self.catalog = PartnerCatalog()
        self.partner = DeliveryPartner(
            id="P1",
            name="Delta Express",
            company_type=CompanyType.COURIER,
            services=[
                ServiceOffering(service_type=ServiceType.EXPRESS, base_price=80, per_km_price=9, active=False),
                ServiceOffering(service_type=ServiceType.EXPRESS, base_price=90, per_km_price=8),
                ServiceOffering(service_type=ServiceType.BULK, base_price=300, per_km_price=4, active=False),
            ],
            working_hours=WorkingHours(
                start=time(8, 0),
                end=time(20, 0),
                days=[Weekday.MONDAY, Weekday.TUESDAY, Weekday.SATURDAY],
            ),
            specializations=[Specialization.DAIRY, Specialization.FROZEN],
        )

    def test_active_offering_skips_inactive(self):
        """The first active offering of the type is returned."""
        offering = self.catalog.active_offering(self.partner, ServiceType.EXPRESS)

        assert offering is not None
        assert offering.base_price == 90

    def test_no_active_offering(self):
        """Inactive or missing types have no offering."""
        assert self.catalog.active_offering(self.partner, ServiceType.BULK) is None
        assert self.catalog.active_offering(self.partner, ServiceType.SAME_DAY) is None
        assert self.catalog.offers_service(self.partner, ServiceType.EXPRESS) is True
        assert self.catalog.offers_service(self.partner, ServiceType.BULK) is False

    def test_working_hours(self):
        """Working days and hours are both required."""
        monday = datetime(2026, 10, 19, 10, 0)
        wednesday = datetime(2026, 10, 21, 10, 0)
        saturday_evening = datetime(2026, 10, 24, 20, 0)
        saturday_morning = datetime(2026, 10, 24, 8, 0)

        assert self.catalog.is_working_at(self.partner, monday) is True
        assert self.catalog.is_working_at(self.partner, wednesday) is False
        assert self.catalog.is_working_at(self.partner, saturday_evening) is False
        assert self.catalog.is_working_at(self.partner, saturday_morning) is True

    def test_default_working_week(self):
        """Partners default to 09:00-18:00, Monday to Friday."""
        partner = DeliveryPartner(id="P2", name="Default", company_type=CompanyType.COURIER)

        assert self.catalog.is_working_at(partner, datetime(2026, 10, 23, 9, 0)) is True
        assert self.catalog.is_working_at(partner, datetime(2026, 10, 25, 12, 0)) is False

    def test_default_working_hours_from_constants(self):
        """Unset working hours use the module defaults."""
        hours = WorkingHours()

        assert hours.start == DEFAULT_WORKING_START == time(9, 0)
        assert hours.end == DEFAULT_WORKING_END == time(18, 0)
        assert hours.days == DEFAULT_WORKING_DAYS

    def test_specializations(self):
        """Declared specializations are recognised."""
        assert self.catalog.handles(self.partner, Specialization.DAIRY) is True
        assert self.catalog.handles(self.partner, Specialization.MEAT) is False
