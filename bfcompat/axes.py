"""Axis types and calibrated axes

An image's shape is an ordered list of calibrated axes; each axis is tagged
with an axis type (X, Y, Z, Time, Channel, ...) and carries its length.
"""
from collections import namedtuple
from dataclasses import dataclass, field

AxisType = namedtuple('AxisType', ['label', 'spatial'])

LinearCalibration = namedtuple('LinearCalibration', ['scale', 'origin', 'unit'])

DEFAULT_CALIBRATION = LinearCalibration(1.0, 0.0, None)


class Axes(object):
    """Known axis types

    Use `Axes.get(label)` to look up a type by label; unknown labels make a
    new non-spatial type which is then reused.
    """
    X = AxisType('X', True)
    Y = AxisType('Y', True)
    Z = AxisType('Z', True)
    TIME = AxisType('Time', False)
    CHANNEL = AxisType('Channel', False)
    SPECTRA = AxisType('Spectra', False)
    LIFETIME = AxisType('Lifetime', False)
    POLARIZATION = AxisType('Polarization', False)
    PHASE = AxisType('Phase', False)
    FREQUENCY = AxisType('Frequency', False)

    _types = {
        t.label: t for t in (
            X, Y, Z, TIME, CHANNEL, SPECTRA, LIFETIME, POLARIZATION, PHASE,
            FREQUENCY
        )
    }

    @classmethod
    def get(cls, label, spatial=False):
        try:
            return cls._types[label]
        except KeyError:
            t = AxisType(label, spatial)
            cls._types[label] = t
            return t

    @classmethod
    def known_types(cls):
        return list(cls._types.values())


@dataclass(frozen=True)
class CalibratedAxis:
    type: AxisType
    '''The semantic type of the axis'''
    length: int
    '''Number of samples along the axis'''
    calibration: LinearCalibration = field(default=DEFAULT_CALIBRATION)
    '''Linear calibration of the axis (scale, origin, unit)'''

    def calibrated_value(self, raw):
        return self.calibration.origin + raw * self.calibration.scale


def calibrate(axis_type, length):
    """Return an axis of the given type with the default calibration"""
    return CalibratedAxis(axis_type, int(length))
