"""Preset build profiles: name lists.

The "core" profile reuses CORE_FUNCS from the mapping tables; the
"underscore" profile is derived at load time from the public surface
minus LODASH_ONLY_FUNCS.
"""

from __future__ import annotations

# Functions Backbone needs from its utility library.
BACKBONE_DEPENDENCIES: tuple[str, ...] = (
    "bind",
    "bindAll",
    "chain",
    "clone",
    "contains",
    "countBy",
    "defaults",
    "difference",
    "escape",
    "every",
    "extend",
    "filter",
    "find",
    "first",
    "forEach",
    "groupBy",
    "has",
    "indexBy",
    "indexOf",
    "initial",
    "invert",
    "invoke",
    "isArray",
    "isEmpty",
    "isEqual",
    "isFunction",
    "isObject",
    "isRegExp",
    "isString",
    "keys",
    "last",
    "lastIndexOf",
    "lodash",
    "map",
    "max",
    "min",
    "mixin",
    "omit",
    "once",
    "pairs",
    "pick",
    "reduce",
    "reduceRight",
    "reject",
    "rest",
    "result",
    "sample",
    "shuffle",
    "size",
    "some",
    "sortBy",
    "sortedIndex",
    "toArray",
    "uniqueId",
    "value",
    "values",
    "without",
    "wrapperChain",
    "wrapperValueOf",
)

# Public functions Underscore does not have.
LODASH_ONLY_FUNCS: tuple[str, ...] = (
    "at",
    "attempt",
    "before",
    "bindKey",
    "callback",
    "camelCase",
    "capitalize",
    "chunk",
    "cloneDeep",
    "create",
    "curry",
    "curryRight",
    "dropRight",
    "dropRightWhile",
    "dropWhile",
    "endsWith",
    "escapeRegExp",
    "findIndex",
    "findKey",
    "findLast",
    "findLastIndex",
    "findLastKey",
    "flattenDeep",
    "forEachRight",
    "forIn",
    "forInRight",
    "forOwn",
    "forOwnRight",
    "isError",
    "isPlainObject",
    "kebabCase",
    "keysIn",
    "mapValues",
    "merge",
    "negate",
    "noop",
    "pad",
    "padLeft",
    "padRight",
    "parseInt",
    "partialRight",
    "pull",
    "pullAt",
    "remove",
    "repeat",
    "runInContext",
    "slice",
    "snakeCase",
    "sortedLastIndex",
    "startsWith",
    "takeRight",
    "takeRightWhile",
    "takeWhile",
    "thru",
    "transform",
    "trim",
    "trimLeft",
    "trimRight",
    "trunc",
    "unzip",
    "valuesIn",
    "wrapperToString",
    "xor",
)

PRESET_DESCRIPTIONS: dict[str, str] = {
    "backbone": "Only the functions Backbone needs",
    "core": "The minimal core build",
    "underscore": "Only the functions Underscore provides",
}
