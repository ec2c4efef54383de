from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class ControlPoint:
    """Knot of a piecewise cubic Hermite curve.

    With ``batch_size=[]`` the instance is a single point. With
    ``batch_size=[k]`` it holds ``k`` points, which is how the segment
    functions receive many segments at once.

    Attributes
    ----------
    position : Tensor
        Location of the knot, shape (*batch, 2).
    tangent : Tensor
        First derivative of the curve at the knot, shape (*batch, 2).
    """

    position: Tensor
    tangent: Tensor
