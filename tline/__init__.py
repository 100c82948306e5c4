from .tl_errors import (
    TransmissionLineError, SingularDivision, UndefinedLineQuantity,
    InvalidParameter, SaturatedReflection, UNDEFINED, is_undefined
)
from .tl_config import EngineConfig, DEFAULT_CONFIG
from .tl_complex import Complex, csinh, ccosh, ctanh
from .tl_params import LineParameters, parse_parameters, LOAD_PRESETS, apply_preset
from .tl_core import DerivedLineState, gamma_Zc, derive_line_state
from .tl_transform import (
    ReflectionState, reflection_coefficient, rotate_reflection, impedance_from_reflection,
    input_impedance_hyperbolic, vswr_from_gamma, return_loss_db, mismatch_loss_db, transform_load
)
from .tl_smith import PlotPoint, SmithChartProjector, smith_forward, smith_inverse
from .tl_waveforms import WaveformSample, Waveform, synthesize, power_flow
from .tl_engine import Solution, evaluate
from .tl_clock import SimulationClock, ManualTickSource, IntervalTickSource, animate
