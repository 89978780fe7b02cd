# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Project(TypedDict):
    name: Optional[str]
    start_date: Optional[pendulum.Date]
    end_date: Optional[pendulum.Date]
