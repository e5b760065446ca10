"""Dependencies shared by route modules that are not tied to identities.

Identity dependencies (``SessionDep``, ``CurrentIdentity``, ``AdminIdentity``)
live in ``artha.auth``.
"""

from typing import Annotated

from fastapi import Depends

from artha.core.config import Settings, get_settings
from artha.translation import TranslationGateway, get_translation_gateway

SettingsDep = Annotated[Settings, Depends(get_settings)]

# Overridden in tests to point at a stubbed provider
GatewayDep = Annotated[TranslationGateway, Depends(get_translation_gateway)]
