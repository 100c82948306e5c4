# tline/tl_engine.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from .tl_config import DEFAULT_CONFIG, EngineConfig
from .tl_core import DerivedLineState, derive_line_state
from .tl_params import LineParameters
from .tl_smith import PlotPoint, SmithChartProjector, SmithGrid
from .tl_transform import ReflectionState, transform_load
from .tl_waveforms import PowerFlow, Waveform, power_flow, synthesize

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Solution:
    params: LineParameters
    derived: DerivedLineState
    reflection: ReflectionState
    load_point: PlotPoint
    input_point: PlotPoint
    grid: SmithGrid
    waveform: Waveform
    power: PowerFlow

def evaluate(p: LineParameters, t: float = 0.0, projector: Optional[SmithChartProjector] = None,
             config: EngineConfig = DEFAULT_CONFIG, samples: Optional[int] = None) -> Solution:
    """Everything a display needs for one parameter snapshot at time t. Nothing is cached."""
    projector = projector or SmithChartProjector(eps=config.epsilon)
    d = derive_line_state(p, config)
    r = transform_load(p, d, config)
    logger.debug("evaluate t=%g: Zc=%s gamma=%s Gamma_in=%s", t, d.Zc, d.gamma, r.gamma_input)
    return Solution(
        params=p, derived=d, reflection=r,
        load_point=projector.project_reflection(r.gamma_load),
        input_point=projector.project_reflection(r.gamma_input),
        grid=projector.grid(),
        waveform=synthesize(p, d, r, t, samples or config.samples),
        power=power_flow(p, d, r),
    )
