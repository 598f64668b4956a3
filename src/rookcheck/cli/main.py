"""Main CLI entry point for rookcheck."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape

from rookcheck import __version__
from rookcheck.utils.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from rookcheck.adapters.k8s_adapter import KubernetesAdapter
    from rookcheck.ceph.command_runner import CephCommandRunner
    from rookcheck.core.config import RookCheckConfig
    from rookcheck.core.models import CephClusterTarget

console = Console()
logger = get_logger(__name__)


class RookCheckContext:
    """Shared context for CLI commands with lazy initialization."""

    def __init__(
        self,
        config_path: str | None,
        kubeconfig: str | None = None,
        kube_context: str | None = None,
        operator_namespace: str | None = None,
        cluster_namespace: str | None = None,
    ):
        """Initialize context with config path and command-line overrides.

        Args:
            config_path: Path to configuration file (optional)
            kubeconfig: Kubeconfig path override (optional)
            kube_context: Kubernetes context override (optional)
            operator_namespace: Operator namespace override (optional)
            cluster_namespace: Cluster namespace override (optional)
        """
        self.config_path = config_path
        self.kubeconfig = kubeconfig
        self.kube_context = kube_context
        self.operator_namespace = operator_namespace
        self.cluster_namespace = cluster_namespace
        self._config: RookCheckConfig | None = None
        self._kubernetes_adapter: KubernetesAdapter | None = None
        self._command_runner: CephCommandRunner | None = None

    @property
    def config(self) -> RookCheckConfig:
        """Get or create config lazily, applying command-line overrides."""
        if self._config is None:
            from rookcheck.core.config import RookCheckConfig

            config = RookCheckConfig.load(self.config_path)
            if self.kubeconfig:
                config.kubernetes.kubeconfig_path = self.kubeconfig
            if self.kube_context:
                config.kubernetes.context = self.kube_context
            if self.operator_namespace:
                config.namespaces.operator = self.operator_namespace
            if self.cluster_namespace:
                config.namespaces.cluster = self.cluster_namespace
            self._config = config
        return self._config

    @property
    def target(self) -> CephClusterTarget:
        """Cluster target from the effective configuration."""
        return self.config.target

    @property
    def kubernetes_adapter(self) -> KubernetesAdapter:
        """Get or create Kubernetes adapter lazily."""
        if self._kubernetes_adapter is None:
            from rookcheck.adapters.k8s_adapter import KubernetesAdapter

            self._kubernetes_adapter = KubernetesAdapter(
                kubeconfig_path=self.config.kubernetes.kubeconfig_path,
                context=self.config.kubernetes.context,
            )
        return self._kubernetes_adapter

    @property
    def command_runner(self) -> CephCommandRunner:
        """Get or create ceph command runner lazily."""
        if self._command_runner is None:
            from rookcheck.ceph.command_runner import CephCommandRunner

            self._command_runner = CephCommandRunner(
                kubernetes_provider=self.kubernetes_adapter,
                ceph=self.config.ceph,
            )
        return self._command_runner


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    type=click.Path(),
    default=None,
    help="Path to configuration file (default: ~/.rookcheck/config.yaml if present)",
)
@click.option("--kubeconfig", type=click.Path(), default=None, help="Path to kubeconfig file")
@click.option("--context", "kube_context", default=None, help="Kubernetes context to use")
@click.option(
    "--operator-namespace",
    default=None,
    help="Namespace of the Rook operator (default: rook-ceph)",
)
@click.option(
    "-n",
    "--namespace",
    "cluster_namespace",
    default=None,
    help="Namespace of the CephCluster (default: rook-ceph)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostic log level (logs go to stderr)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    kubeconfig: str | None,
    kube_context: str | None,
    operator_namespace: str | None,
    cluster_namespace: str | None,
    log_level: str | None,
) -> None:
    """Inspect the health of a Rook-managed Ceph cluster."""
    rook_ctx = RookCheckContext(
        config_path=config,
        kubeconfig=kubeconfig,
        kube_context=kube_context,
        operator_namespace=operator_namespace,
        cluster_namespace=cluster_namespace,
    )

    try:
        logging_config = rook_ctx.config.logging
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        ctx.exit(1)

    setup_logging(
        level=log_level or logging_config.level,
        format=logging_config.format,
        output=logging_config.output,
    )
    ctx.obj = rook_ctx


@cli.command()
@click.option(
    "--output",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Report format",
)
@click.pass_context
def health(ctx: click.Context, output_format: str) -> None:
    """Check mon/osd/mgr pods, ceph health and placement groups."""
    from rookcheck.checks.check_registry import default_registry
    from rookcheck.checks.evaluator import HealthEvaluator
    from rookcheck.interfaces.check import CheckContext
    from rookcheck.output.console import ConsoleReportSink

    rook_ctx: RookCheckContext = ctx.obj

    async def _health() -> None:
        try:
            context = CheckContext(
                kubernetes_provider=rook_ctx.kubernetes_adapter,
                status_fetcher=rook_ctx.command_runner,
                ceph=rook_ctx.config.ceph,
            )
            evaluator = HealthEvaluator(registry=default_registry(), context=context)

            if output_format == "json":
                report = await evaluator.evaluate(rook_ctx.target)
                print(json.dumps(report.model_dump(mode="json"), indent=2))
            else:
                await evaluator.evaluate(rook_ctx.target, sink=ConsoleReportSink(console))

        except Exception as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
            logger.error("health_command_failed", error=str(e))
            ctx.exit(1)

    asyncio.run(_health())


@cli.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("args", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def ceph(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Run a 'ceph' CLI command with arbitrary args.

    Commands run in the operator pod; `ceph daemon osd.N ...` runs in the
    pod of that OSD.
    """
    rook_ctx: RookCheckContext = ctx.obj
    logger.info("running_ceph_command", args=list(args))

    async def _ceph() -> str:
        return await rook_ctx.command_runner.run(list(args), rook_ctx.target)

    try:
        output = asyncio.run(_ceph())
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        ctx.exit(1)

    click.echo(output, nl=not output.endswith("\n"))


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration and connectivity."""
    rook_ctx: RookCheckContext = ctx.obj

    console.print("[bold magenta]rookcheck Validate Command[/bold magenta]\n")

    async def _validate() -> None:
        console.print("[bold]1. Configuration[/bold]")
        target = rook_ctx.target
        console.print(f"  Operator namespace: {target.operator_namespace}")
        console.print(f"  Cluster namespace: {target.cluster_namespace}")
        console.print("  [green]✓ Configuration valid[/green]\n")

        console.print("[bold]2. Kubernetes Connectivity[/bold]")
        try:
            adapter = rook_ctx.kubernetes_adapter
            namespaces = [target.operator_namespace]
            if not target.shared_namespace:
                namespaces.append(target.cluster_namespace)
            for namespace in namespaces:
                pods = await adapter.get_pods(namespace)
                console.print(f"  [green]✓ {len(pods)} pod(s) in {namespace}[/green]")
            console.print()
        except Exception as e:
            console.print(
                f"  [red]✗ Kubernetes connection failed: {escape(str(e))}[/red]\n",
                soft_wrap=True,
            )
            return

        console.print("[bold]3. Rook Operator[/bold]")
        try:
            pod = await rook_ctx.command_runner.find_operator_pod(target)
            console.print(f"  [green]✓ Operator pod {pod.name} is running[/green]\n")
        except Exception as e:
            console.print(f"  [red]✗ {escape(str(e))}[/red]\n", soft_wrap=True)
            return

        console.print("[bold green]✓ Validation complete![/bold green]")

    asyncio.run(_validate())


if __name__ == "__main__":
    cli()
