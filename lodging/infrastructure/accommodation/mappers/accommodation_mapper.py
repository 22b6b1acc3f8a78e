"""Mapper for Accommodation ORM ↔ Domain conversion."""

from lodging.domain.accommodation.entities.accommodation import Accommodation
from lodging.domain.accommodation.value_objects import (
    AccommodationStatus,
    AccommodationType,
    Address,
    CancellationPolicy,
    CancellationPolicyType,
    HotelProfile,
    Location,
    Policies,
)
from lodging.domain.common.value_objects import AccommodationId, UserId
from lodging.models import Accommodation as AccommodationORM

_PROFILE_FIELDS = (
    "star_rating",
    "total_floors",
    "total_rooms",
    "year_built",
    "year_renovated",
    "contact_phone",
    "contact_email",
    "website",
)


class AccommodationMapper:
    """Mapper for Accommodation ORM ↔ Domain conversion."""

    def _profile_to_domain(self, orm_model: AccommodationORM) -> HotelProfile | None:
        values = {name: getattr(orm_model, name) for name in _PROFILE_FIELDS}
        if all(value is None for value in values.values()):
            return None
        return HotelProfile(**values)

    def to_domain(self, orm_model: AccommodationORM) -> Accommodation:
        """Convert ORM model to domain entity."""
        return Accommodation.create_with_id(
            id=AccommodationId(orm_model.id),
            type=AccommodationType.parse(orm_model.type, field="type"),
            name=orm_model.name,
            status=AccommodationStatus.parse(orm_model.status, field="status"),
            owner_id=UserId(orm_model.owner_id),
            address=Address(
                street=orm_model.street,
                ward=orm_model.ward,
                district=orm_model.district,
                province=orm_model.province,
                country=orm_model.country,
            ),
            location=Location(latitude=orm_model.latitude, longitude=orm_model.longitude),
            description=orm_model.description,
            images=list(orm_model.images or []),
            amenities=list(orm_model.amenities or []),
            policies=Policies(
                check_in_time=orm_model.check_in_time,
                check_out_time=orm_model.check_out_time,
                children_allowed=orm_model.children_allowed,
                pets_allowed=orm_model.pets_allowed,
                smoking_allowed=orm_model.smoking_allowed,
            ),
            cancellation_policy=CancellationPolicy(
                type=CancellationPolicyType.parse(orm_model.cancellation_type),
                free_cancellation_days=orm_model.free_cancellation_days,
                refund_percentage=orm_model.refund_percentage,
            ),
            approved_by=UserId(orm_model.approved_by) if orm_model.approved_by else None,
            approved_at=orm_model.approved_at,
            hotel_profile=self._profile_to_domain(orm_model),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Accommodation, orm_model: AccommodationORM | None = None
    ) -> AccommodationORM:
        """Convert domain entity to ORM model, updating `orm_model` in place when given."""
        if orm_model is None:
            orm_model = AccommodationORM(id=domain_entity.id.value)

        orm_model.type = domain_entity.type.value
        orm_model.name = domain_entity.name
        orm_model.status = domain_entity.status.value
        orm_model.owner_id = domain_entity.owner_id.value

        address = domain_entity.address
        orm_model.street = address.street
        orm_model.ward = address.ward
        orm_model.district = address.district
        orm_model.province = address.province
        orm_model.country = address.country

        orm_model.latitude = domain_entity.location.latitude
        orm_model.longitude = domain_entity.location.longitude
        orm_model.description = domain_entity.description
        orm_model.images = list(domain_entity.images)
        orm_model.amenities = list(domain_entity.amenities)

        policies = domain_entity.policies
        orm_model.check_in_time = policies.check_in_time
        orm_model.check_out_time = policies.check_out_time
        orm_model.children_allowed = policies.children_allowed
        orm_model.pets_allowed = policies.pets_allowed
        orm_model.smoking_allowed = policies.smoking_allowed

        cancellation = domain_entity.cancellation_policy
        orm_model.cancellation_type = cancellation.type.value
        orm_model.free_cancellation_days = cancellation.free_cancellation_days
        orm_model.refund_percentage = cancellation.refund_percentage

        approved_by = domain_entity.approved_by
        orm_model.approved_by = approved_by.value if approved_by else None
        orm_model.approved_at = domain_entity.approved_at

        profile = domain_entity.hotel_profile or HotelProfile()
        for name in _PROFILE_FIELDS:
            setattr(orm_model, name, getattr(profile, name))

        orm_model.created_at = domain_entity.created_at
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
