"""Static TypeScript/React sources written into the output directory.

The scaffold files are written once and then belong to the user. The
``TypeScriptSyntax`` helpers build the lines of the regenerated modules.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Template:
    filename: str
    content: str


ICON_COMPONENT = Template(
    filename="Icon.tsx",
    content="""import {CSSProperties, DOMAttributes, FC, FunctionComponent, memo, SVGProps} from 'react';
import * as iconComponents from './icons';
import { IconType } from './types';

export interface IconProps {
  className?: string;
  name: IconType;
  size?: number;
  fill?: string;
  style?: CSSProperties;
  onClick?: DOMAttributes<SVGSVGElement>['onClick'];
}

export const iconTestId = 'icon';

const getIconName = (name: IconType) => `Icon${name}`;

export const Icon: FC<IconProps> = memo(({ className, name, fill = 'currentColor', size, style, onClick, ...rest }) => {
  const IconComponent =
    (iconComponents[getIconName(name) as keyof typeof iconComponents] as FunctionComponent<SVGProps<SVGSVGElement>>) ||
    null;

  return (
    IconComponent && (
      <IconComponent
        onClick={onClick}
        data-testid={iconTestId}
        fill={fill}
        data-name={name}
        className={className}
        style={{ ...style, width: size, height: size }}
        {...rest}
      />
    )
  );
});

""",
)

INDEX = Template(
    filename="index.tsx",
    content="""export * from './Icon';
export * from './types';

""",
)

SCAFFOLD: Tuple[Template, ...] = (ICON_COMPONENT, INDEX)


class TypeScriptSyntax:
    """Emits the type manifest and re-export modules as TypeScript source."""

    INDENT = "    "

    @staticmethod
    def union_type() -> str:
        return "\n\nexport type IconType = typeof iconNames[number];\n"

    @classmethod
    def names_list(cls, names: Sequence[str]) -> str:
        if not names:
            return "export const iconNames = [] as const;" + cls.union_type()

        last = len(names) - 1
        out = "export const iconNames = ["
        for idx, name in enumerate(names):
            out += f"\n{cls.INDENT}'{name}',"
            if idx == last:
                out += "\n] as const;" + cls.union_type()
        return out

    @staticmethod
    def reexport(component_name: str, module_path: str) -> str:
        return f"export {{ ReactComponent as {component_name} }} from '{module_path}';\n"

    @staticmethod
    def empty_module() -> str:
        return "export {};\n"
