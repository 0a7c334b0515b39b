import io
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pytest

from object2code import Byte, Char, Double, Extensions, Float, Long, Short
from object2code.codegen.languages.java import JavaDialect
from object2code.codegen.languages.python import PythonDialect


@dataclass
class Bean:
    myBoolean: bool = False
    myByte: Byte = Byte(0)
    myInt: int = 0


Bean.__module__ = "pkg"


class Node:
    def __init__(self, name=None, child=None):
        self.name = name
        self.child = child


Node.__module__ = "pkg"


class Pair:
    def __init__(self):
        self.left = None
        self.right = None


Pair.__module__ = "pkg"


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


Point.__module__ = "pkg"


class Color(Enum):
    RED = 1
    GREEN = 2


Color.__module__ = "pkg"


class AccessorBean:
    def __init__(self):
        self._count = 0
        self._active = False
        self._label = "fixed"

    def getCount(self) -> int:
        return self._count

    def setCount(self, count):
        self._count = count

    def isActive(self) -> bool:
        return self._active

    def setActive(self, active):
        self._active = active

    def getLabel(self) -> str:
        return self._label


AccessorBean.__module__ = "pkg"


@dataclass
class TestBean:
    """Bean covering every scalar width plus nested beans and containers."""

    __test__ = False

    class MyEnum(Enum):
        MY_ENUM_VALUE = 1

    @dataclass
    class MyInnerClass:
        value: Optional[str] = None

    myBoolean: bool = False
    myByte: Byte = Byte(0)
    myChar: Char = Char("\0")
    myDouble: Double = Double(0.0)
    myEnum: object = None
    myFloat: Float = Float(0.0)
    myInnerClass: object = None
    myInt: int = 0
    myLong: Long = Long(0)
    myShort: Short = Short(0)
    myString: Optional[str] = None
    myString2TestBeanMap: object = None
    myStringCollection: object = None
    myTestBean: object = None


for _cls in (TestBean, TestBean.MyEnum, TestBean.MyInnerClass):
    _cls.__module__ = "de.incentergy.test"


@pytest.fixture
def java():
    return JavaDialect()


@pytest.fixture
def python():
    return PythonDialect()


@pytest.fixture
def extensions():
    return Extensions()


@pytest.fixture
def text_sink():
    return io.StringIO()
