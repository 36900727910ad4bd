"""
Dishka DI Container Setup.

- Registers all dependencies (database client, repositories, services, commands)
- Maps abstract repository ports to their Prisma implementations
- Manages lifecycle: the database client lives as long as the container
  (Scope.APP); everything built on top of it is created per request

Flow:
  Container → provides → PrismaMarketRepository → to → MarketService → to → MarketAddCommand
                                    ↓
                            uses MarketRepository port

DatabaseProvider and AppProvider are separate so tests can pair AppProvider
with a provider handing out an in-memory client instead of Prisma.
"""

import logging
from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from src.application.commands import (
    ItemCategoryRootCommand,
    MarketRootCommand,
    ProposalRootCommand,
    RpcCommandDispatcher,
    TemplateRootCommand,
)
from src.application.commands.listing_item_template import (
    TemplateAddCommand,
    TemplateGetCommand,
    TemplateRemoveCommand,
    TemplateSearchCommand,
)
from src.application.commands.item_category import ItemCategoryListCommand
from src.application.commands.market import MarketAddCommand, MarketListCommand
from src.application.commands.proposal import ProposalGetCommand, ProposalListCommand
from src.application.services import (
    DefaultDataService,
    ItemCategoryService,
    ListingItemTemplateService,
    MarketService,
    ProfileService,
    ProposalService,
)
from src.domain.ports.repositories import (
    ItemCategoryRepository,
    ListingItemTemplateRepository,
    MarketRepository,
    ProfileRepository,
    ProposalRepository,
)
from src.infrastructure.persistence import (
    DatabaseClient,
    PrismaItemCategoryRepository,
    PrismaListingItemTemplateRepository,
    PrismaMarketRepository,
    PrismaProfileRepository,
    PrismaProposalRepository,
)

logger = logging.getLogger(__name__)


class DatabaseProvider(Provider):
    """Provides the Prisma client (singleton, app-scoped)."""

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[DatabaseClient]:
        """
        - Scope.APP = created ONCE when the container starts, shared across requests
        - Disconnected when the container is closed
        - Imported here: the prisma package only exposes the client once
          `prisma generate` has run
        """
        from prisma import Prisma

        prisma = Prisma()
        await prisma.connect()
        logger.info("[Prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[Prisma] Disconnected")


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers repositories, services and RPC commands.
    """

    scope = Scope.REQUEST

    # ==================== REPOSITORIES ====================

    @provide
    def get_profile_repository(self, client: DatabaseClient) -> ProfileRepository:
        return PrismaProfileRepository(client)

    @provide
    def get_market_repository(self, client: DatabaseClient) -> MarketRepository:
        return PrismaMarketRepository(client)

    @provide
    def get_proposal_repository(self, client: DatabaseClient) -> ProposalRepository:
        return PrismaProposalRepository(client)

    @provide
    def get_listing_item_template_repository(
        self, client: DatabaseClient
    ) -> ListingItemTemplateRepository:
        return PrismaListingItemTemplateRepository(client)

    @provide
    def get_item_category_repository(self, client: DatabaseClient) -> ItemCategoryRepository:
        return PrismaItemCategoryRepository(client)

    # ==================== SERVICES ====================

    @provide
    def get_profile_service(self, profile_repository: ProfileRepository) -> ProfileService:
        return ProfileService(profile_repository)

    @provide
    def get_market_service(
        self,
        market_repository: MarketRepository,
        profile_repository: ProfileRepository,
    ) -> MarketService:
        return MarketService(market_repository, profile_repository)

    @provide
    def get_proposal_service(
        self, proposal_repository: ProposalRepository
    ) -> ProposalService:
        return ProposalService(proposal_repository)

    @provide
    def get_listing_item_template_service(
        self,
        listing_item_template_repository: ListingItemTemplateRepository,
        profile_repository: ProfileRepository,
        item_category_repository: ItemCategoryRepository,
    ) -> ListingItemTemplateService:
        return ListingItemTemplateService(
            listing_item_template_repository, profile_repository, item_category_repository
        )

    @provide
    def get_item_category_service(
        self, item_category_repository: ItemCategoryRepository
    ) -> ItemCategoryService:
        return ItemCategoryService(item_category_repository)

    @provide
    def get_default_data_service(
        self,
        profile_service: ProfileService,
        market_service: MarketService,
        item_category_service: ItemCategoryService,
    ) -> DefaultDataService:
        return DefaultDataService(profile_service, market_service, item_category_service)

    # ==================== COMMANDS ====================

    @provide
    def get_template_root_command(
        self, listing_item_template_service: ListingItemTemplateService
    ) -> TemplateRootCommand:
        return TemplateRootCommand(
            [
                TemplateAddCommand(listing_item_template_service),
                TemplateGetCommand(listing_item_template_service),
                TemplateRemoveCommand(listing_item_template_service),
                TemplateSearchCommand(listing_item_template_service),
            ]
        )

    @provide
    def get_market_root_command(self, market_service: MarketService) -> MarketRootCommand:
        return MarketRootCommand(
            [
                MarketAddCommand(market_service),
                MarketListCommand(market_service),
            ]
        )

    @provide
    def get_proposal_root_command(
        self, proposal_service: ProposalService
    ) -> ProposalRootCommand:
        return ProposalRootCommand(
            [
                ProposalGetCommand(proposal_service),
                ProposalListCommand(proposal_service),
            ]
        )

    @provide
    def get_item_category_root_command(
        self, item_category_service: ItemCategoryService
    ) -> ItemCategoryRootCommand:
        return ItemCategoryRootCommand([ItemCategoryListCommand(item_category_service)])

    @provide
    def get_rpc_command_dispatcher(
        self,
        template_root: TemplateRootCommand,
        market_root: MarketRootCommand,
        proposal_root: ProposalRootCommand,
        item_category_root: ItemCategoryRootCommand,
    ) -> RpcCommandDispatcher:
        return RpcCommandDispatcher(
            [template_root, market_root, proposal_root, item_category_root]
        )


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Without arguments: AppProvider + DatabaseProvider (Prisma)
    - With arguments: AppProvider + the given providers (e.g. an in-memory database)
    - Call this ONCE at app startup
    """
    return make_async_container(AppProvider(), *(providers or (DatabaseProvider(),)))
