from sqlalchemy.orm import as_declarative, declared_attr


@as_declarative()
class Base:
    """Base class for all menu database models."""

    # Generate tablename automatically
    @declared_attr
    def __tablename__(cls) -> str:
        """Generate database table name automatically."""
        return cls.__name__.lower()
