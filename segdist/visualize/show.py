import numpy as np
import pyvista

from segdist.geometry.line import Line
from segdist.geometry.segment import Segment
from segdist.utils.spatial.distance import closest_distance


def _input_mesh(geometry, param, line_extent):
    if isinstance(geometry, Segment):
        return pyvista.Line(pointa=geometry.start.as_array(), pointb=geometry.end.as_array())
    # Infinite lines are drawn as a finite piece centered on the closest point.
    pointa = geometry.point_at(param - line_extent)
    pointb = geometry.point_at(param + line_extent)
    return pyvista.Line(pointa=pointa.as_array(), pointb=pointb.as_array())


def build_meshes(first, second, result=None, line_extent=1.0, point_radius=None):
    """
    Build the PyVista meshes describing a closest-distance query.

    Parameters
    ----------
    first, second : Line or Segment
        The two inputs of the query.
    result : DistanceResult, optional
        Precomputed result for ``(first, second)``. Computed when omitted.
    line_extent : float, optional
        Infinite lines are drawn for parameters ``param +/- line_extent``
        around their closest point. Default is 1.0.
    point_radius : float, optional
        Radius of the spheres marking the closest points. Defaults to 1% of
        the diagonal of the drawn geometry.

    Returns
    -------
    dict
        ``{'first', 'second', 'point1', 'point2'}`` meshes, plus a
        ``'connector'`` line when the two closest points differ.
    """
    if result is None:
        result = closest_distance(first, second)
    meshes = {
        'first': _input_mesh(first, result.param1, line_extent),
        'second': _input_mesh(second, result.param2, line_extent),
    }
    if point_radius is None:
        points = np.vstack([meshes['first'].points, meshes['second'].points])
        diagonal = float(np.linalg.norm(points.max(axis=0) - points.min(axis=0)))
        point_radius = 0.01 * diagonal if diagonal > 0.0 else 0.01
    meshes['point1'] = pyvista.Sphere(radius=point_radius, center=result.point1.as_array())
    meshes['point2'] = pyvista.Sphere(radius=point_radius, center=result.point2.as_array())
    if result.distance > 0.0:
        meshes['connector'] = pyvista.Line(pointa=result.point1.as_array(),
                                           pointb=result.point2.as_array())
    return meshes


def show(first, second, result=None, colors=('red', 'blue'), line_extent=1.0,
         return_plotter=False, **kwargs):
    """
    Visualize two lines/segments and the shortest connector between them.

    Parameters
    ----------
    first, second : Line or Segment
        The two inputs of the query.
    result : DistanceResult, optional
        Precomputed result. Computed when omitted.
    colors : tuple of str, optional
        Colors of the first and second input. The connector is drawn black.
    line_extent : float, optional
        See :func:`build_meshes`.
    return_plotter : bool, optional
        If True, the PyVista ``Plotter`` is returned instead of being shown.
    **kwargs : dict, optional
        Additional keyword arguments passed to ``pyvista.Plotter``.

    Returns
    -------
    plotter : pyvista.Plotter, optional
        Only when ``return_plotter`` is True.

    Examples
    --------

    .. code-block:: python

        >>> from segdist import Line, Segment
        >>> from segdist.visualize import show
        >>> show(Line((0, 0, 0), (1, 0, 1)), Segment((4, 8, 0), (19, 8, 0)), line_extent=5.0)

    """
    if not isinstance(first, (Line, Segment)) or not isinstance(second, (Line, Segment)):
        raise TypeError("show expects Line or Segment inputs.")
    meshes = build_meshes(first, second, result=result, line_extent=line_extent)
    plotter = pyvista.Plotter(**kwargs)
    plotter.add_mesh(meshes['first'], color=colors[0], line_width=3)
    plotter.add_mesh(meshes['second'], color=colors[1], line_width=3)
    plotter.add_mesh(meshes['point1'], color=colors[0])
    plotter.add_mesh(meshes['point2'], color=colors[1])
    if 'connector' in meshes:
        plotter.add_mesh(meshes['connector'], color='black', line_width=2)
    if return_plotter:
        return plotter
    plotter.show()
