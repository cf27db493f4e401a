"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports) and domain events for campus
event management. The domain layer has NO dependencies on any framework or
infrastructure.

Structure:
- entities/: Account, Event, Registration
- value_objects/: OneTimePassword, AuthContext, RegistrationTokenPayload
- protocols/: Repository, unit of work and service ports
- events/: Things that happened (AccountRegistered, RegistrationCreated, ...)
"""
