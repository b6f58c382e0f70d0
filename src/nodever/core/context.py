"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from nodever.core.activation import ActivationManager
from nodever.core.catalog import RemoteCatalog
from nodever.core.config_store import ConfigStore, FilesystemConfigStore, GlobalConfig, load_config
from nodever.core.extractor.abc import Extractor
from nodever.core.extractor.real import TarballExtractor
from nodever.core.filesystem.abc import Filesystem
from nodever.core.filesystem.real import RealFilesystem
from nodever.core.platform import ArchToken, HostPlatform, OsToken, PlatformResolver
from nodever.core.registry import RegistryContext
from nodever.core.runtime.abc import Runtime
from nodever.core.runtime.real import RealRuntime
from nodever.core.store import VersionStore
from nodever.core.terminal.abc import Terminal
from nodever.core.terminal.real import RealTerminal
from nodever.core.transport.abc import Transport
from nodever.core.transport.real import create_transport
from nodever.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class NodeverContext:
    """Immutable context holding all dependencies for nodever operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    The lifecycle services (store, activation, catalog, platform) are built
    on demand from the gateways below; they hold no state of their own
    beyond these references.
    """

    transport: Transport
    extractor: Extractor
    filesystem: Filesystem
    runtime: Runtime
    terminal: Terminal
    feedback: UserFeedback
    config_store: ConfigStore
    config: GlobalConfig
    host: HostPlatform

    @property
    def registry(self) -> RegistryContext:
        return RegistryContext.for_prefix(self.config.prefix)

    @property
    def activation(self) -> ActivationManager:
        return ActivationManager(self.registry, self.filesystem, self.runtime)

    @property
    def platform(self) -> PlatformResolver:
        return PlatformResolver(self.transport, self.config.mirror, self.host)

    @property
    def catalog(self) -> RemoteCatalog:
        return RemoteCatalog(self.transport, self.config.mirror)

    @property
    def store(self) -> VersionStore:
        return VersionStore(
            self.registry,
            transport=self.transport,
            platform=self.platform,
            extractor=self.extractor,
            activation=self.activation,
        )

    @staticmethod
    def for_test(
        prefix: Path,
        transport: Transport | None = None,
        extractor: Extractor | None = None,
        filesystem: Filesystem | None = None,
        runtime: Runtime | None = None,
        terminal: Terminal | None = None,
        feedback: UserFeedback | None = None,
        config_store: ConfigStore | None = None,
        config: GlobalConfig | None = None,
        host: HostPlatform | None = None,
    ) -> "NodeverContext":
        """Create test context with fakes for every unspecified gateway.

        The prefix is required and should live under tmp_path: the registry
        and the deployment target are real directories, and the default
        RealFilesystem performs real merges into them.

        Example:
            >>> transport = FakeTransport(pages={"https://nodejs.org/dist/": index})
            >>> ctx = NodeverContext.for_test(tmp_path / "prefix", transport=transport)
            >>> result = runner.invoke(cli, ["ls"], obj=ctx)
        """
        from nodever.core.config_store import DEFAULT_MIRROR, InMemoryConfigStore
        from nodever.core.extractor.fake import FakeExtractor
        from nodever.core.runtime.fake import FakeRuntime
        from nodever.core.terminal.fake import FakeTerminal
        from nodever.core.transport.fake import FakeTransport
        from nodever.core.user_feedback import FakeUserFeedback

        if config is None:
            config = GlobalConfig(
                prefix=prefix,
                mirror=DEFAULT_MIRROR,
                downloader="auto",
                http_timeout=None,
            )

        return NodeverContext(
            transport=transport if transport is not None else FakeTransport(),
            extractor=extractor if extractor is not None else FakeExtractor(),
            filesystem=filesystem if filesystem is not None else RealFilesystem(),
            runtime=runtime if runtime is not None else FakeRuntime(),
            terminal=terminal if terminal is not None else FakeTerminal(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            config_store=(
                config_store if config_store is not None else InMemoryConfigStore(config)
            ),
            config=config,
            host=host if host is not None else HostPlatform(os=OsToken.LINUX, arch=ArchToken.X64),
        )


def create_context(config_store: ConfigStore | None = None) -> NodeverContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        NoDownloaderAvailable: If the configured downloader cannot be used
        ValueError: If the config file or NODEVER_* variables are invalid
    """
    if config_store is None:
        config_store = FilesystemConfigStore()
    config = load_config(config_store, os.environ)

    return NodeverContext(
        transport=create_transport(config.downloader, config.http_timeout),
        extractor=TarballExtractor(),
        filesystem=RealFilesystem(),
        runtime=RealRuntime(),
        terminal=RealTerminal(),
        feedback=InteractiveFeedback(),
        config_store=config_store,
        config=config,
        host=HostPlatform.detect(),
    )
