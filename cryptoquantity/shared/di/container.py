from dependency_injector import containers, providers

from cryptoquantity.adapters.serialization import QuantityCodec
from cryptoquantity.domain.services import PrecisionPolicy, PrecisionService
from cryptoquantity.domain.services.factory import QuantityFactory
from cryptoquantity.shared.config import get_settings
from cryptoquantity.shared.logging import get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    precision_policy = providers.Singleton(
        PrecisionPolicy,
        default_precision=config.default_precision,
        max_precision=config.max_precision,
        strict=config.strict_precision,
    )

    precision_service = providers.Singleton(
        PrecisionService,
        policy=precision_policy,
    )

    quantity_factory = providers.Singleton(
        QuantityFactory,
        precision_service=precision_service,
    )

    quantity_codec = providers.Singleton(QuantityCodec)


def get_container() -> Container:
    settings = get_settings()

    container = Container()

    container.config.from_dict(
        {
            "default_precision": settings.DEFAULT_PRECISION,
            "max_precision": settings.MAX_PRECISION,
            "strict_precision": settings.STRICT_PRECISION,
        }
    )

    logger.debug(
        "di_container_configured",
        default_precision=settings.DEFAULT_PRECISION,
        strict_precision=settings.STRICT_PRECISION,
    )

    return container
