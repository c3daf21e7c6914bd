"""Experiment runners."""

from .run_one import run_experiment
from .run_grid import run_grid
