"""Template sources for the generated Express project.

Each entry maps a template name to its Jinja2 source.  Source files live
under a per-language prefix (``javascript/`` or ``typescript/``); the
variant-independent templates sit at the root.  Only ``README.md.j2`` has
placeholders, every other template is a flat literal.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# JavaScript
# ---------------------------------------------------------------------------

_JS_INDEX = """\
import app from "./src/app.js";

const PORT = process.env.PORT || 3000;
app.listen(PORT, () => console.log(`🚀 Server running on port ${PORT}`));
"""

_JS_APP = """\
import express from "express";
import router from "./routes/index.js";
import logger from "./middlewares/logger.js";

const app = express();
app.use(express.json());
app.use(logger);
app.use("/", router);

export default app;
"""

_JS_ROUTER = """\
import express from "express";
import { homeController } from "../controllers/home.js";

const router = express.Router();
router.get("/", homeController);

export default router;
"""

_JS_CONTROLLER = """\
export const homeController = (req, res) => {
  res.json({ message: "Hello from Express + JavaScript!" });
};
"""

_JS_MIDDLEWARE = """\
const logger = (req, res, next) => {
  console.log(`[LOG] ${req.method} ${req.url}`);
  next();
};

export default logger;
"""

# ---------------------------------------------------------------------------
# TypeScript
# ---------------------------------------------------------------------------

_TS_INDEX = """\
import app from "./src/app";

const PORT = process.env.PORT || 3000;
app.listen(PORT, () => console.log(`🚀 Server running on port ${PORT}`));
"""

_TS_APP = """\
import express from "express";
import router from "./routes/index";
import logger from "./middlewares/logger";

const app = express();
app.use(express.json());
app.use(logger);
app.use("/", router);

export default app;
"""

_TS_ROUTER = """\
import express from "express";
import { homeController } from "../controllers/home";

const router = express.Router();
router.get("/", homeController);

export default router;
"""

_TS_CONTROLLER = """\
import { Request, Response } from "express";

export const homeController = (req: Request, res: Response) => {
  res.json({ message: "Hello from Express + TypeScript!" });
};
"""

_TS_MIDDLEWARE = """\
import { Request, Response, NextFunction } from "express";

const logger = (req: Request, res: Response, next: NextFunction) => {
  console.log(`[LOG] ${req.method} ${req.url}`);
  next();
};

export default logger;
"""

# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------

_GITIGNORE = """\
node_modules
dist
.env
.DS_Store
npm-debug.log*
"""

_README = """\
# {{ package_name }}

A simple Express {{ language }} starter generated with `create-express-app`.

## 🚀 Folder Structure
```
.
 ├── src/
 │   ├── routes/
 │   ├── controllers/
 │   ├── middlewares/
 │   └── app.{{ ext }}
 ├── index.{{ ext }}
 ├── package.json
{% if has_compiler_config %}
 ├── tsconfig.json
{% endif %}
 ├── .gitignore
 └── README.md
```

## 🧰 Quick Start
```bash
cd {{ cd_target }}
npm install
npm run dev
```
"""


TEMPLATE_SOURCES: dict[str, str] = {
    "javascript/index.j2": _JS_INDEX,
    "javascript/app.j2": _JS_APP,
    "javascript/routes/index.j2": _JS_ROUTER,
    "javascript/controllers/home.j2": _JS_CONTROLLER,
    "javascript/middlewares/logger.j2": _JS_MIDDLEWARE,
    "typescript/index.j2": _TS_INDEX,
    "typescript/app.j2": _TS_APP,
    "typescript/routes/index.j2": _TS_ROUTER,
    "typescript/controllers/home.j2": _TS_CONTROLLER,
    "typescript/middlewares/logger.j2": _TS_MIDDLEWARE,
    "gitignore.j2": _GITIGNORE,
    "README.md.j2": _README,
}
