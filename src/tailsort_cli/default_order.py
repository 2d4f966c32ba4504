"""Default canonical class order.

Roughly follows Tailwind's layer order: layout, flexbox/grid, spacing,
sizing, typography, backgrounds, borders, effects, transitions. Projects with
their own order pass ``sortOrder`` in the config file or use an order command.
"""

from __future__ import annotations

_GROUPS: tuple[tuple[str, ...], ...] = (
    # layout
    ("container", "box-border", "box-content"),
    ("block", "inline-block", "inline", "flex", "inline-flex", "table", "table-row",
     "table-cell", "grid", "inline-grid", "contents", "hidden"),
    ("float-right", "float-left", "float-none", "clear-both", "clear-none"),
    ("object-contain", "object-cover", "object-fill", "object-none", "object-center"),
    ("overflow-auto", "overflow-hidden", "overflow-visible", "overflow-scroll",
     "overflow-x-auto", "overflow-y-auto", "overflow-x-hidden", "overflow-y-hidden"),
    ("static", "fixed", "absolute", "relative", "sticky"),
    ("inset-0", "inset-x-0", "inset-y-0", "top-0", "right-0", "bottom-0", "left-0"),
    ("visible", "invisible"),
    ("z-0", "z-10", "z-20", "z-30", "z-40", "z-50", "z-auto"),
    # flexbox and grid
    ("flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse"),
    ("flex-wrap", "flex-wrap-reverse", "flex-nowrap"),
    ("flex-1", "flex-auto", "flex-initial", "flex-none", "flex-grow", "flex-grow-0",
     "flex-shrink", "flex-shrink-0", "grow", "grow-0", "shrink", "shrink-0"),
    ("order-first", "order-last", "order-none"),
    ("grid-cols-1", "grid-cols-2", "grid-cols-3", "grid-cols-4", "grid-cols-6", "grid-cols-12",
     "col-span-1", "col-span-2", "col-span-3", "col-span-full", "grid-rows-1", "grid-rows-2"),
    ("gap-0", "gap-1", "gap-2", "gap-3", "gap-4", "gap-6", "gap-8"),
    ("justify-start", "justify-end", "justify-center", "justify-between", "justify-around",
     "justify-evenly"),
    ("content-center", "content-start", "content-end", "content-between"),
    ("items-start", "items-end", "items-center", "items-baseline", "items-stretch"),
    ("self-auto", "self-start", "self-end", "self-center", "self-stretch"),
    # spacing
    ("p-0", "p-1", "p-2", "p-3", "p-4", "p-5", "p-6", "p-8", "p-10", "p-12"),
    ("px-0", "px-1", "px-2", "px-3", "px-4", "px-6", "px-8",
     "py-0", "py-1", "py-2", "py-3", "py-4", "py-6", "py-8"),
    ("pt-0", "pt-2", "pt-4", "pr-0", "pr-2", "pr-4", "pb-0", "pb-2", "pb-4", "pl-0", "pl-2", "pl-4"),
    ("m-0", "m-1", "m-2", "m-3", "m-4", "m-6", "m-8", "m-auto"),
    ("mx-0", "mx-2", "mx-4", "mx-auto", "my-0", "my-2", "my-4", "my-8"),
    ("mt-0", "mt-2", "mt-4", "mt-8", "mr-0", "mr-2", "mr-4", "mb-0", "mb-2", "mb-4", "mb-8",
     "ml-0", "ml-2", "ml-4", "ml-auto"),
    ("space-x-2", "space-x-4", "space-y-2", "space-y-4"),
    # sizing
    ("w-0", "w-1/2", "w-1/3", "w-2/3", "w-1/4", "w-3/4", "w-4", "w-8", "w-16", "w-32", "w-64",
     "w-auto", "w-full", "w-screen"),
    ("min-w-0", "min-w-full", "max-w-xs", "max-w-sm", "max-w-md", "max-w-lg", "max-w-xl",
     "max-w-2xl", "max-w-4xl", "max-w-full", "max-w-screen-xl"),
    ("h-0", "h-4", "h-8", "h-16", "h-32", "h-64", "h-auto", "h-full", "h-screen"),
    ("min-h-0", "min-h-full", "min-h-screen", "max-h-full", "max-h-screen"),
    # typography
    ("font-sans", "font-serif", "font-mono"),
    ("text-xs", "text-sm", "text-base", "text-lg", "text-xl", "text-2xl", "text-3xl",
     "text-4xl", "text-5xl", "text-6xl"),
    ("italic", "not-italic"),
    ("font-thin", "font-light", "font-normal", "font-medium", "font-semibold", "font-bold",
     "font-extrabold", "font-black"),
    ("tracking-tight", "tracking-normal", "tracking-wide"),
    ("leading-none", "leading-tight", "leading-snug", "leading-normal", "leading-relaxed",
     "leading-loose"),
    ("list-none", "list-disc", "list-decimal"),
    ("text-left", "text-center", "text-right", "text-justify"),
    ("text-transparent", "text-black", "text-white", "text-gray-100", "text-gray-300",
     "text-gray-500", "text-gray-700", "text-gray-900", "text-red-500", "text-green-500",
     "text-blue-500", "text-blue-600"),
    ("underline", "line-through", "no-underline"),
    ("uppercase", "lowercase", "capitalize", "normal-case"),
    ("truncate", "whitespace-normal", "whitespace-nowrap", "break-words", "break-all"),
    # backgrounds
    ("bg-transparent", "bg-black", "bg-white", "bg-gray-50", "bg-gray-100", "bg-gray-200",
     "bg-gray-500", "bg-gray-800", "bg-gray-900", "bg-red-500", "bg-green-500",
     "bg-blue-500", "bg-blue-600", "bg-blue-700"),
    ("bg-cover", "bg-contain", "bg-center", "bg-no-repeat"),
    # borders
    ("rounded-none", "rounded-sm", "rounded", "rounded-md", "rounded-lg", "rounded-xl",
     "rounded-2xl", "rounded-full"),
    ("border-0", "border", "border-2", "border-4", "border-t", "border-r", "border-b", "border-l"),
    ("border-solid", "border-dashed", "border-none"),
    ("border-transparent", "border-black", "border-white", "border-gray-200", "border-gray-300",
     "border-blue-500"),
    # effects
    ("shadow-sm", "shadow", "shadow-md", "shadow-lg", "shadow-xl", "shadow-none"),
    ("opacity-0", "opacity-25", "opacity-50", "opacity-75", "opacity-100"),
    # interactivity and transitions
    ("cursor-auto", "cursor-default", "cursor-pointer", "cursor-not-allowed"),
    ("select-none", "select-text", "pointer-events-none", "pointer-events-auto"),
    ("transition", "transition-all", "transition-colors", "transition-none"),
    ("duration-75", "duration-150", "duration-300", "ease-in", "ease-out", "ease-in-out"),
    ("transform", "scale-95", "scale-100", "scale-105", "rotate-45", "rotate-90"),
)

DEFAULT_SORT_ORDER: tuple[str, ...] = tuple(name for group in _GROUPS for name in group)
