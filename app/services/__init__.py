"""서비스 패키지: 비즈니스 로직 계층.

Service package, the business logic layer.
Each service is an abstract contract plus an implementation that maps
transfer objects to ORM entities and receives its repository through the
constructor.
"""
