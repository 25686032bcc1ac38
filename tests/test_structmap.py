import dataclasses
import datetime
from typing import Optional

from authkit.structmap import struct_map_to_struct


@dataclasses.dataclass
class Foo:
    s_bar: Optional[str]
    f_bar: float
    i_bar: int
    t_bar: datetime.datetime
    p_bar: Optional[str]
    created_at: datetime.datetime


@dataclasses.dataclass
class NFoo:
    created_at: Optional[datetime.datetime] = None


@dataclasses.dataclass
class TFoo:
    n_foo: NFoo = dataclasses.field(default_factory=NFoo)
    id: int = 0
    s_bar: str = ""
    f_bar: Optional[float] = None
    i_bar: Optional[int] = None
    t_bar: Optional[datetime.datetime] = None
    p_bar: str = ""


def test_struct_map_to_struct():
    now = datetime.datetime.now()
    foo = Foo(s_bar="bar", f_bar=1.1, i_bar=1, t_bar=now, p_bar=None, created_at=now)
    tfoo = TFoo()
    struct_map_to_struct(foo, tfoo)
    assert tfoo.s_bar == foo.s_bar
    assert tfoo.f_bar == foo.f_bar
    assert tfoo.i_bar == foo.i_bar
    assert tfoo.t_bar == foo.t_bar
    assert tfoo.n_foo.created_at == foo.created_at
    assert tfoo.p_bar == ""
    assert tfoo.id == 0


def test_non_dataclass_is_ignored():
    tfoo = TFoo()
    struct_map_to_struct({"s_bar": "x"}, tfoo)
    assert tfoo.s_bar == ""