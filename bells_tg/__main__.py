"""Отправная точна для запуска рассылки звонков.

```sh
python -m bells_tg
```
"""

import asyncio

from bells_tg.bot import main

if __name__ == "__main__":
    asyncio.run(main())
