"""Click CLI commands for planetgen."""

import logging
import random

import click

from .constants import CLI_SECTOR_COUNT, CLI_STACK_COUNT, DEFAULT_DISPLAY_RADIUS
from .export import export_planet
from .planet import Planet
from .scene import load_scene

logger = logging.getLogger(__name__)

# SceneParseError and UnicodeDecodeError are ValueErrors
_BUILD_ERRORS = (ValueError, OSError)


def _make_planet(scene: str, sectors: int, stacks: int,
                 radius: float, seed) -> Planet:
    rng = random.Random(seed) if seed is not None else None
    params = load_scene(scene, rng=rng)
    return Planet(params, radius=radius, sector_count=sectors,
                  stack_count=stacks, seed=seed)


@click.group()
def cli():
    """planetgen CLI for generating procedural planet meshes."""
    pass


@cli.command()
@click.argument('scene')
@click.option('--output', '-o', default='planet.ply', help='Output mesh path (.ply, .glb, .obj, .stl)')
@click.option('--sectors', default=CLI_SECTOR_COUNT, show_default=True, help='Longitude divisions')
@click.option('--stacks', default=CLI_STACK_COUNT, show_default=True, help='Latitude divisions')
@click.option('--radius', '-r', default=DEFAULT_DISPLAY_RADIUS, show_default=True, help='Mesh-space radius')
@click.option('--seed', type=int, default=None, help='Seed for the random biome draws')
@click.option('--scale', '-s', default=1.0, help='Scale factor applied on export')
def build(scene: str, output: str, sectors: int, stacks: int,
          radius: float, seed, scale: float):
    """Build a planet mesh from a scene description file."""
    try:
        planet = _make_planet(scene, sectors, stacks, radius, seed)
        result = export_planet(planet, output, scale=scale)
    except _BUILD_ERRORS as e:
        logger.error(f"Error building planet: {e}")
        raise click.ClickException(str(e))

    click.echo(f"Wrote {result['output_path']}: {result['faces']} faces, "
               f"{result['vertices']} vertices ({result['size_mb']} MB)")


@cli.command()
@click.argument('scene')
@click.option('--sectors', default=CLI_SECTOR_COUNT, show_default=True, help='Longitude divisions')
@click.option('--stacks', default=CLI_STACK_COUNT, show_default=True, help='Latitude divisions')
@click.option('--seed', type=int, default=None, help='Seed for the random biome draws')
def info(scene: str, sectors: int, stacks: int, seed):
    """Print mesh statistics for a scene without writing a file."""
    try:
        planet = _make_planet(scene, sectors, stacks, DEFAULT_DISPLAY_RADIUS, seed)
    except _BUILD_ERRORS as e:
        logger.error(f"Error reading scene: {e}")
        raise click.ClickException(str(e))

    click.echo(planet.describe())
    hm = planet.heightmap
    click.echo(f"    Oblateness: {planet.oblateness:.6f}")
    click.echo(f"   Height span: {hm.min_height:.3f} .. {hm.max_height:.3f}")
    click.echo(f"   Interleaved: {planet.interleaved_vertex_size} bytes "
               f"(stride {planet.interleaved_stride})")


def main():
    cli()
