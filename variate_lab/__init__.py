"""
variate_lab - Seedable Random Generators and Probability Distributions
"""

__version__ = "1.0.0"

from loguru import logger

# =============================================================================
# CORE TYPES
# =============================================================================
from .types import (
    DistributionKind,
    DistributionSummary,
    Generator,
    GoodnessOfFitResult,
    MomentValidationResult,
    SamplerCallable,
    SamplingStrategy,
    HasAlpha,
    HasBeta,
    HasGamma,
    HasLambda,
    HasMu,
    HasNu,
    HasSigma,
    HasTheta,
    HasWeights,
)

# =============================================================================
# ERRORS
# =============================================================================
from .errors import (
    VariateLabError,
    InvalidGeneratorError,
    InvalidParameterError,
    UndefinedStatisticError,
)

# =============================================================================
# GENERATORS
# =============================================================================
from .generators import (
    AbstractGenerator,
    XorShift128Generator,
    NR3Generator,
    MT19937Generator,
    ALFGenerator,
    StandardGenerator,
    GENERATORS,
    create_generator,
)

# =============================================================================
# DISTRIBUTIONS
# =============================================================================
from .distributions import (
    AbstractDistribution,
    ContinuousDistribution,
    DiscreteDistribution,
)
from .continuous import (
    ContinuousUniform,
    Normal,
    Exponential,
    Gamma,
    Beta,
    BetaPrime,
    Cauchy,
    Chi,
    ChiSquare,
    Erlang,
    FisherSnedecor,
    FisherTippett,
    Laplace,
    Logistic,
    Lognormal,
    Pareto,
    Power,
    Rayleigh,
    StudentsT,
    Triangular,
    Weibull,
)
from .discrete import (
    Bernoulli,
    Binomial,
    Categorical,
    DiscreteUniform,
    Geometric,
    Poisson,
)

# =============================================================================
# REGISTRY & FACADE
# =============================================================================
from .registry import (
    DistributionFactory,
    DistributionRegistry,
    DistributionInfo,
)
from .variates import (
    Variates,
    distributed_doubles,
    distributed_integers,
    doubles,
    integers,
    unsigned_integers,
    booleans,
    choice,
    choices,
)

# =============================================================================
# SIMULATION & CONFIG
# =============================================================================
from .simulation import (
    DistributionSimulator,
    MomentValidator,
    goodness_of_fit,
    to_scipy,
)
from .config import LabConfig, configure_logging

# Silent unless the application opts in via configure_logging.
logger.disable("variate_lab")

# =============================================================================
# PUBLIC API
# =============================================================================
__all__ = [
    "__version__",
    # Types
    "DistributionKind",
    "DistributionSummary",
    "Generator",
    "GoodnessOfFitResult",
    "MomentValidationResult",
    "SamplerCallable",
    "SamplingStrategy",
    "HasAlpha",
    "HasBeta",
    "HasGamma",
    "HasLambda",
    "HasMu",
    "HasNu",
    "HasSigma",
    "HasTheta",
    "HasWeights",
    # Errors
    "VariateLabError",
    "InvalidGeneratorError",
    "InvalidParameterError",
    "UndefinedStatisticError",
    # Generators
    "AbstractGenerator",
    "XorShift128Generator",
    "NR3Generator",
    "MT19937Generator",
    "ALFGenerator",
    "StandardGenerator",
    "GENERATORS",
    "create_generator",
    # Distributions
    "AbstractDistribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "ContinuousUniform",
    "Normal",
    "Exponential",
    "Gamma",
    "Beta",
    "BetaPrime",
    "Cauchy",
    "Chi",
    "ChiSquare",
    "Erlang",
    "FisherSnedecor",
    "FisherTippett",
    "Laplace",
    "Logistic",
    "Lognormal",
    "Pareto",
    "Power",
    "Rayleigh",
    "StudentsT",
    "Triangular",
    "Weibull",
    "Bernoulli",
    "Binomial",
    "Categorical",
    "DiscreteUniform",
    "Geometric",
    "Poisson",
    # Registry & facade
    "DistributionFactory",
    "DistributionRegistry",
    "DistributionInfo",
    "Variates",
    "distributed_doubles",
    "distributed_integers",
    "doubles",
    "integers",
    "unsigned_integers",
    "booleans",
    "choice",
    "choices",
    # Simulation & config
    "DistributionSimulator",
    "MomentValidator",
    "goodness_of_fit",
    "to_scipy",
    "LabConfig",
    "configure_logging",
]
